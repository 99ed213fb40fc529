"""Plain-text waiting-time report."""

from __future__ import annotations

import sys
from typing import TextIO

from aedwait.data.snapshot import FeedSnapshot
from aedwait.language import get_language


def format_report(snapshot: FeedSnapshot, lang: str) -> list[str]:
    """Return the report lines for a snapshot, entries in feed order."""
    language = get_language(lang)
    lines = [
        language.header,
        f"{language.updated_label}\t{snapshot.update_time}",
    ]
    for entry in snapshot.entries:
        lines.append(f"{entry.hosp_name:<{language.name_width}}\t{entry.top_wait}")
    return lines


def render_report(snapshot: FeedSnapshot, lang: str, out: TextIO | None = None) -> None:
    """Write the report to out (stdout by default)."""
    stream = out if out is not None else sys.stdout
    for line in format_report(snapshot, lang):
        stream.write(line + "\n")


__all__ = ["format_report", "render_report"]
