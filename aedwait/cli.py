"""Command-line entry point: print the current A&E waiting times."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from aedwait import __version__
from aedwait.config import AppConfig, load_config
from aedwait.data.feed_client import AEDFeedClient
from aedwait.data.retry import fetch_with_retry
from aedwait.language import InvalidLanguage, normalize_language
from aedwait.rendering.report import render_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FETCH_FAILED = 1
EXIT_USAGE = 2


def _build_id() -> str:
    return os.environ.get("AED_WAIT_BUILD", "").strip() or __version__


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="aed-wait",
        description="Accident & Emergency waiting time by hospital (Hospital Authority open data).",
        epilog=f"Build: {_build_id()}",
    )
    parser.add_argument("-lang", "--lang", default=None, help="Language. e.g.: en, sc, tc")
    parser.add_argument("-max", "--max", dest="max_attempts", type=_positive_int, default=None, help="maximum retry")
    parser.add_argument("--config", default=None, help="path to config YAML")
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def run(lang_token: str, max_attempts: int, config: AppConfig) -> int:
    try:
        lang = normalize_language(lang_token)
    except InvalidLanguage:
        print("incorrect parameter", file=sys.stderr)
        return EXIT_USAGE

    client = AEDFeedClient(
        url_template=config.feed.url_template,
        timeout_seconds=config.feed.timeout_seconds,
        user_agent=config.feed.user_agent,
    )
    outcome = fetch_with_retry(lambda: client.get_wait_times(lang), max_attempts=max_attempts)
    if outcome.snapshot is None:
        sys.stderr.write(outcome.error_report())
        return EXIT_FETCH_FAILED

    logger.debug("Fetched %d entries after %d attempt(s)", len(outcome.snapshot.entries), outcome.attempts)
    render_report(outcome.snapshot, lang)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        config = load_config(args.config)
    except ValueError as exc:
        print(f"config error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(config.log.level)

    lang_token = args.lang if args.lang is not None else config.feed.default_lang
    max_attempts = args.max_attempts if args.max_attempts is not None else config.feed.max_attempts
    if max_attempts < 1:
        print(f"config error: max_attempts must be at least 1, got {max_attempts}", file=sys.stderr)
        return EXIT_USAGE

    return run(lang_token, max_attempts, config)


if __name__ == "__main__":
    raise SystemExit(main())
