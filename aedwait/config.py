"""Configuration loader for the A&E waiting-time client."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Any

from dotenv import load_dotenv
import yaml

from aedwait.data.feed_client import AED_FEED_URL, DEFAULT_TIMEOUT_SECONDS, USER_AGENT
from aedwait.data.retry import DEFAULT_MAX_ATTEMPTS
from aedwait.language import DEFAULT_LANGUAGE

DEFAULT_CONFIG_PATH = "config/config.yaml"


@dataclass(frozen=True)
class FeedConfig:
    """Feed request configuration."""

    url_template: str = AED_FEED_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = USER_AGENT
    default_lang: str = DEFAULT_LANGUAGE
    max_attempts: int = DEFAULT_MAX_ATTEMPTS


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    feed: FeedConfig
    log: LoggingConfig


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{key}' config must be a mapping")
    return section


def _int_value(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'{name}' must be an integer, got {value!r}") from exc


def _float_value(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'{name}' must be a number, got {value!r}") from exc


def _str_value(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"'{name}' must be a string, got {value!r}")
    return value


def _level_value(value: Any) -> str:
    level = str(value).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown logging level: {value!r}")
    return level


def load_config(path: str | None = None) -> AppConfig:
    """Load configuration from a YAML file, falling back to built-in defaults.

    A missing file is only an error when a path was given explicitly.
    AED_WAIT_LANG and AED_WAIT_MAX_ATTEMPTS override the file.
    """
    load_dotenv()
    explicit = path is not None
    path = path or DEFAULT_CONFIG_PATH
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        if explicit:
            raise ValueError(f"Config file not found: {path}") from exc
        data = {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Config file is not valid YAML: {path}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    feed_section = _section(data, "feed")
    logging_section = _section(data, "logging")
    defaults = FeedConfig()

    max_attempts = os.environ.get("AED_WAIT_MAX_ATTEMPTS") or feed_section.get(
        "max_attempts", defaults.max_attempts
    )
    feed = FeedConfig(
        url_template=_str_value(feed_section.get("url_template", defaults.url_template), "url_template"),
        timeout_seconds=_float_value(feed_section.get("timeout_seconds", defaults.timeout_seconds), "timeout_seconds"),
        user_agent=_str_value(feed_section.get("user_agent", defaults.user_agent), "user_agent"),
        default_lang=_str_value(
            os.environ.get("AED_WAIT_LANG") or feed_section.get("default_lang", defaults.default_lang),
            "default_lang",
        ),
        max_attempts=_int_value(max_attempts, "max_attempts"),
    )

    if "{lang}" not in feed.url_template:
        raise ValueError("'url_template' must contain a {lang} placeholder")

    log = LoggingConfig(level=_level_value(logging_section.get("level", LoggingConfig.level)))

    return AppConfig(feed=feed, log=log)
