"""Data structures decoded from the A&E waiting-time feed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class SnapshotFormatError(ValueError):
    """Raised when a decoded feed body does not have the expected shape."""


@dataclass(frozen=True)
class WaitTimeEntry:
    """Waiting time reported for one hospital."""

    hosp_name: str
    top_wait: str


@dataclass(frozen=True)
class FeedSnapshot:
    """One successful fetch of the feed; entries keep the feed order."""

    update_time: str
    entries: list[WaitTimeEntry]


def _string_field(item: dict[str, Any], key: str, context: str) -> str:
    value = item.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise SnapshotFormatError(f"'{key}' in {context} must be a string")
    return value


def parse_snapshot(data: Any) -> FeedSnapshot:
    """Build a FeedSnapshot from the decoded JSON body."""
    if not isinstance(data, dict):
        raise SnapshotFormatError("Feed body must be a JSON object")

    raw_entries = data.get("waitTime")
    if raw_entries is None:
        raw_entries = []
    if not isinstance(raw_entries, list):
        raise SnapshotFormatError("'waitTime' must be a list")

    entries = []
    for index, item in enumerate(raw_entries):
        if not isinstance(item, dict):
            raise SnapshotFormatError(f"waitTime[{index}] must be an object")
        context = f"waitTime[{index}]"
        entries.append(
            WaitTimeEntry(
                hosp_name=_string_field(item, "hospName", context),
                top_wait=_string_field(item, "topWait", context),
            )
        )

    return FeedSnapshot(
        update_time=_string_field(data, "updateTime", "feed"),
        entries=entries,
    )


__all__ = ["FeedSnapshot", "SnapshotFormatError", "WaitTimeEntry", "parse_snapshot"]
