"""Language definitions for the waiting-time report."""

from __future__ import annotations

from dataclasses import dataclass


class InvalidLanguage(ValueError):
    """Raised when a language token is not one of the accepted aliases."""


@dataclass(frozen=True)
class Language:
    """A feed language and the labels used to render it."""

    code: str  # feed code: "en", "sc", "tc"
    header: str
    updated_label: str
    name_width: int


SUPPORTED_LANGUAGES = {
    "en": Language(
        code="en",
        header="Accident and Emergency Waiting Time by Hospital",
        updated_label="Last updated on:",
        name_width=44,
    ),
    "sc": Language(code="sc", header="急症室等候时间", updated_label="最后更新时间", name_width=20),
    "tc": Language(code="tc", header="急症室等候時間", updated_label="最後更新時間", name_width=20),
}

DEFAULT_LANGUAGE = "tc"

_ALIASES = {
    "e": "en",
    "en": "en",
    "s": "sc",
    "sc": "sc",
    "t": "tc",
    "tc": "tc",
}


def normalize_language(token: str) -> str:
    """Map a user-supplied token to its canonical code. Raises InvalidLanguage."""
    try:
        return _ALIASES[token]
    except KeyError:
        raise InvalidLanguage(f"Unsupported language: {token!r}") from None


def get_language(code: str) -> Language:
    """Get a Language by canonical code or alias."""
    return SUPPORTED_LANGUAGES[normalize_language(code)]


__all__ = ["DEFAULT_LANGUAGE", "InvalidLanguage", "Language", "SUPPORTED_LANGUAGES", "get_language", "normalize_language"]
