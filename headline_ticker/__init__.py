"""
Headline Ticker - deduplicated RSS/Atom headlines as a scrolling ticker.

This package fetches a small set of feeds, drops noise entries, collapses
near-duplicate stories reported by several outlets into one, and scrolls
the result in a text console or an always-on-top bar.

Main entry point is the CLI via the `headline-ticker run` command.

Example:
    $ headline-ticker run -c ticker.yaml --display console
"""

__all__ = [
    "__version__",
    "HeadlineItem",
    "RawFeedItem",
    "dedup_headlines",
    "filter_title",
    "fingerprint",
    "is_near_duplicate",
    "normalize_text",
]
__version__ = "0.1.0"

from .core.dedup import dedup_headlines
from .core.filter import filter_title
from .core.fingerprint import fingerprint
from .core.normalize import normalize_text
from .core.similarity import is_near_duplicate
from .types import HeadlineItem, RawFeedItem
