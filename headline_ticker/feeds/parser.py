"""
Best-effort RSS/Atom field extraction.

feedparser handles RSS 0.9x/1.0/2.0 and Atom; only each entry's title and
description are kept. No validation is attempted beyond that: entries that
lack a field simply carry None for it.
"""

from __future__ import annotations

from typing import Any

import feedparser

from ..types import RawFeedItem


class FeedParseError(ValueError):
    """Raised when a document yields no entries and feedparser reported an error."""


def parse_feed(data: bytes | str, feed_url: str = "") -> list[RawFeedItem]:
    """Parse a feed document into raw title/description pairs.

    Malformed ("bozo") documents still return whatever entries feedparser
    managed to recover. Only a document that produced no entries and a
    parser error is treated as a failure.

    Args:
        data: Raw feed document
        feed_url: Address the document was fetched from, recorded on each item

    Returns:
        Entries in document order

    Raises:
        FeedParseError: If nothing could be recovered from a malformed document
    """
    if isinstance(data, str):
        # feedparser treats str input as a possible URL or file name.
        data = data.encode("utf-8")
    parsed = feedparser.parse(data)
    entries = parsed.get("entries") or []
    if not entries and parsed.get("bozo"):
        exc = parsed.get("bozo_exception")
        raise FeedParseError(f"{type(exc).__name__}: {exc}" if exc else "Unparseable feed")

    return [
        RawFeedItem(
            title=_text_field(entry.get("title")),
            description=_entry_description(entry),
            feed_url=feed_url,
        )
        for entry in entries
    ]


def _entry_description(entry: Any) -> str | None:
    """Pick summary/description, falling back to the first content block."""
    for key in ("summary", "description"):
        value = _text_field(entry.get(key))
        if value:
            return value
    for content in entry.get("content") or []:
        value = _text_field(content.get("value"))
        if value:
            return value
    return None


def _text_field(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    return value if value.strip() else None
