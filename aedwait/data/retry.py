"""Bounded retry around a single feed fetch."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
import logging
from typing import Callable

from aedwait.data.feed_client import AEDFeedError
from aedwait.data.snapshot import FeedSnapshot

logger = logging.getLogger(__name__)

HONG_KONG_TZ = timezone(timedelta(hours=8))
DEFAULT_MAX_ATTEMPTS = 2
ERROR_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
ERROR_LABEL = "出現錯誤："


def _now_hk() -> datetime:
    return datetime.now(HONG_KONG_TZ)


@dataclass(frozen=True)
class FetchOutcome:
    """Result of a retried fetch; snapshot is None when every attempt failed."""

    snapshot: FeedSnapshot | None
    attempts: int
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.snapshot is not None

    def error_report(self) -> str:
        return "".join(f"{line}\n" for line in self.errors)


def format_error_line(exc: Exception, when: datetime) -> str:
    stamp = when.astimezone(HONG_KONG_TZ).strftime(ERROR_TIME_FORMAT)
    return f"{stamp} {ERROR_LABEL} {exc}"


def fetch_with_retry(
    fetch: Callable[[], FeedSnapshot],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    now: Callable[[], datetime] = _now_hk,
) -> FetchOutcome:
    """Call fetch until it succeeds or max_attempts feed errors have been logged."""
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    errors: list[str] = []
    for attempt in range(1, max_attempts + 1):
        try:
            snapshot = fetch()
        except AEDFeedError as exc:
            logger.info("Fetch attempt %d/%d failed: %s", attempt, max_attempts, exc)
            errors.append(format_error_line(exc, now()))
            continue
        return FetchOutcome(snapshot=snapshot, attempts=attempt, errors=errors)

    return FetchOutcome(snapshot=None, attempts=max_attempts, errors=errors)


__all__ = ["DEFAULT_MAX_ATTEMPTS", "FetchOutcome", "HONG_KONG_TZ", "fetch_with_retry", "format_error_line"]
