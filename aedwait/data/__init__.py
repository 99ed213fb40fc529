"""Feed access: HTTP client, decoded snapshot and retry loop."""

from aedwait.data.feed_client import AEDFeedClient, AEDFeedError, DecodeError, FetchFailed, TransportError
from aedwait.data.retry import FetchOutcome, fetch_with_retry
from aedwait.data.snapshot import FeedSnapshot, WaitTimeEntry, parse_snapshot

__all__ = [
    "AEDFeedClient",
    "AEDFeedError",
    "DecodeError",
    "FeedSnapshot",
    "FetchFailed",
    "FetchOutcome",
    "TransportError",
    "WaitTimeEntry",
    "fetch_with_retry",
    "parse_snapshot",
]
