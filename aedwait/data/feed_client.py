"""Hospital Authority A&E waiting-time feed client."""

from __future__ import annotations

import logging

import requests

from aedwait.data.snapshot import FeedSnapshot, SnapshotFormatError, parse_snapshot

logger = logging.getLogger(__name__)

AED_FEED_URL = "http://www.ha.org.hk/opendata/aed/aedwtdata-{lang}.json"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/96.0.4664.45 Safari/537.36"
)
DEFAULT_TIMEOUT_SECONDS = 10.0


class AEDFeedError(Exception):
    """Base class for retryable feed failures."""


class TransportError(AEDFeedError):
    """Raised when the request cannot be completed (DNS, connect, timeout)."""


class FetchFailed(AEDFeedError):
    """Raised when the feed answers with a non-200 status."""

    def __init__(self, status: str) -> None:
        super().__init__(f"Request was not OK: {status}")
        self.status = status


class DecodeError(AEDFeedError):
    """Raised when the response body is not a valid feed document."""


class AEDFeedClient:
    """Thin wrapper around the A&E waiting-time feed using requests."""

    def __init__(
        self,
        url_template: str = AED_FEED_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = USER_AGENT,
    ) -> None:
        self._url_template = url_template
        self._timeout_seconds = timeout_seconds
        self._user_agent = user_agent

    def feed_url(self, lang: str) -> str:
        return self._url_template.format(lang=lang)

    def get_wait_times(self, lang: str) -> FeedSnapshot:
        """Fetch and decode the feed for a canonical language code."""
        url = self.feed_url(lang)
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self._user_agent,
        }
        logger.debug("GET %s", url)
        try:
            response = requests.get(
                url,
                headers=headers,
                timeout=self._timeout_seconds,
                allow_redirects=True,
            )
        except requests.RequestException as exc:
            raise TransportError(f"AED feed request failed: {exc}") from exc

        try:
            if response.status_code != 200:
                raise FetchFailed(f"{response.status_code} {response.reason or ''}".strip())

            try:
                data = response.json()
            except ValueError as exc:
                raise DecodeError(f"AED feed response was not valid JSON: {exc}") from exc

            try:
                return parse_snapshot(data)
            except SnapshotFormatError as exc:
                raise DecodeError(f"AED feed response had an unexpected shape: {exc}") from exc
        finally:
            response.close()


__all__ = [
    "AED_FEED_URL",
    "AEDFeedClient",
    "AEDFeedError",
    "DecodeError",
    "FetchFailed",
    "TransportError",
    "USER_AGENT",
]
