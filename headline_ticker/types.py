"""
Core data types for the Headline Ticker.

This module defines the data structures passed between pipeline stages:
- RawFeedItem: Fields extracted from a feed entry before any cleanup
- HeadlineItem: A cleaned, accepted headline ready for dedup and display
- FeedResult: Outcome of fetching and parsing a single feed
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawFeedItem:
    """Represents a feed entry exactly as the parser extracted it.

    Attributes:
        title: The entry title, possibly containing markup or entities
        description: The entry summary/description, if the feed had one
        feed_url: Address of the feed this entry came from
    """
    title: str | None
    description: str | None = None
    feed_url: str = ""


@dataclass(frozen=True)
class HeadlineItem:
    """A normalized headline that passed the noise filter.

    Attributes:
        title: Plain-text headline
        description: Plain-text description, or None if absent or empty
    """
    title: str
    description: str | None = None


@dataclass
class FeedResult:
    """Result of fetching a single feed.

    Either items will be populated (success) or error will be set (failure).
    A feed that parsed cleanly but had no entries has neither.

    Attributes:
        url: The feed address
        items: Entries extracted from the feed, in document order
        status_code: HTTP status code, or None if no response was received
        error: Error message if the fetch or parse failed, None otherwise
        error_category: "timeout", "http_error", "network_failed", "parse_failed" or "unknown"
    """
    url: str
    items: list[RawFeedItem] = field(default_factory=list)
    status_code: int | None = None
    error: str | None = None
    error_category: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
