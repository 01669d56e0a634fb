"""
Feed fetching and parsing.

This package handles the I/O boundary: HTTP fetching of feeds and
extraction of title/description pairs from RSS/Atom documents.
"""

from .fetcher import categorize_error, fetch_feed, fetch_feeds, fetch_feeds_async
from .parser import FeedParseError, parse_feed

__all__ = [
    "categorize_error",
    "fetch_feed",
    "fetch_feeds",
    "fetch_feeds_async",
    "FeedParseError",
    "parse_feed",
]
