"""
Headline deduplication by first occurrence.

Incoming headlines are processed in order. Each one is compared against the
headlines already kept and dropped if any of them is a near-duplicate, so
the first outlet to report a story wins. The output cap is applied after
deduplication, never to the raw input.

Matching is pairwise against kept items only and is not transitive: if A~B
and B~C but not A~C, and B was dropped as a duplicate of A, C is still kept.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from ..config import DedupConfig
from ..types import HeadlineItem
from .fingerprint import DEFAULT_MIN_TOKEN_LENGTH, DEFAULT_STOPWORD_SET, fingerprint
from .similarity import DEFAULT_THRESHOLD, judge_fingerprints


def dedup_headlines(
    items: Iterable[HeadlineItem],
    max_items: int | None = None,
    threshold: float = DEFAULT_THRESHOLD,
    stopwords: Iterable[str] = DEFAULT_STOPWORD_SET,
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH,
) -> list[HeadlineItem]:
    """Remove near-duplicate headlines, keeping the first of each story.

    Args:
        items: Filtered headlines in processing order
        max_items: Cap applied to the deduplicated list (None for no cap)
        threshold: Jaccard threshold passed to the similarity judge
        stopwords: Words ignored when fingerprinting titles
        min_token_length: Shortest token kept in a fingerprint

    Returns:
        Deduplicated headlines in their original order, at most max_items long
    """
    stop = frozenset(stopwords)
    kept: list[HeadlineItem] = []
    # Fingerprints of kept titles, aligned with `kept`.
    kept_prints: list[frozenset[str]] = []

    for item in items:
        candidate = fingerprint(item.title, stop, min_token_length)
        if _matches_any(item.title, candidate, kept, kept_prints, threshold):
            continue
        kept.append(item)
        kept_prints.append(candidate)

    return cap_items(kept, max_items)


def dedup_with_config(items: Iterable[HeadlineItem], cfg: DedupConfig) -> list[HeadlineItem]:
    """Run dedup_headlines with settings from DedupConfig.

    When dedup is disabled only the cap is applied.
    """
    if not cfg.enabled:
        return cap_items(list(items), cfg.max_items)
    return dedup_headlines(
        items,
        max_items=cfg.max_items,
        threshold=cfg.threshold,
        stopwords=cfg.stopwords,
        min_token_length=cfg.min_token_length,
    )


def cap_items(items: Sequence[HeadlineItem], max_items: int | None) -> list[HeadlineItem]:
    if max_items is None:
        return list(items)
    return list(items[:max(max_items, 0)])


def _matches_any(
    title: str,
    candidate: frozenset[str],
    kept: list[HeadlineItem],
    kept_prints: list[frozenset[str]],
    threshold: float,
) -> bool:
    for existing, existing_print in zip(kept, kept_prints):
        if judge_fingerprints(title, existing.title, candidate, existing_print, threshold):
            return True
    return False
