"""
Headline cleanup and deduplication.

This package contains the pure, synchronous part of the ticker: text
normalization, noise filtering, fingerprinting, similarity and dedup.
It performs no I/O.
"""

from .dedup import cap_items, dedup_headlines, dedup_with_config
from .filter import filter_title, prepare_item, rejection_reason
from .fingerprint import fingerprint, tokenize
from .normalize import normalize_text
from .similarity import contains_either, is_near_duplicate, jaccard

__all__ = [
    "cap_items",
    "contains_either",
    "dedup_headlines",
    "dedup_with_config",
    "filter_title",
    "fingerprint",
    "is_near_duplicate",
    "jaccard",
    "normalize_text",
    "prepare_item",
    "rejection_reason",
    "tokenize",
]
