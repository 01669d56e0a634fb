"""
Noise filtering for candidate headlines.

Feeds mix real headlines with wire-service sequence numbers, section names
and app/subscription prompts. These rules reject such entries before they
reach deduplication. The thresholds are empirical and come from FilterConfig.
"""

from __future__ import annotations

from functools import lru_cache
import re

from ..config import FilterConfig
from ..types import HeadlineItem, RawFeedItem
from .normalize import normalize_text


REJECT_EMPTY = "empty"
REJECT_DIGITS = "digits_only"
REJECT_SHORT = "too_short"
REJECT_FEW_WORDS = "too_few_words"
REJECT_NOISE = "noise_phrase"


def rejection_reason(title: str | None, cfg: FilterConfig) -> str | None:
    """Return why a title is rejected, or None if it is acceptable.

    Rules are applied in order and the first match wins:
    empty, digits only, too short, too few words, noise phrase.
    """
    if not title or not title.strip():
        return REJECT_EMPTY
    if cfg.max_digits_length > 0 and re.fullmatch(rf"\d{{1,{cfg.max_digits_length}}}", title):
        return REJECT_DIGITS
    if len(title) < cfg.min_length:
        return REJECT_SHORT
    if len(title.split()) < cfg.min_words:
        return REJECT_FEW_WORDS
    pattern = _noise_pattern(tuple(cfg.noise_phrases))
    if pattern is not None and pattern.search(title):
        return REJECT_NOISE
    return None


def filter_title(title: str | None, cfg: FilterConfig) -> str | None:
    """Return the title unchanged if it passes every rule, otherwise None."""
    if rejection_reason(title, cfg) is not None:
        return None
    return title


def prepare_item(raw: RawFeedItem, cfg: FilterConfig) -> HeadlineItem | None:
    """Normalize a raw feed entry and apply the title filter.

    Args:
        raw: Entry as extracted from the feed
        cfg: Filter thresholds and vocabulary

    Returns:
        A HeadlineItem, or None if the title is absent or rejected
    """
    title = filter_title(normalize_text(raw.title), cfg)
    if title is None:
        return None
    return HeadlineItem(title=title, description=normalize_text(raw.description))


@lru_cache(maxsize=16)
def _noise_pattern(phrases: tuple[str, ...]) -> re.Pattern[str] | None:
    """Compile the noise vocabulary into one word-bounded, case-insensitive regex."""
    alternatives = []
    for phrase in phrases:
        words = phrase.split()
        if words:
            alternatives.append(r"\s+".join(re.escape(word) for word in words))
    if not alternatives:
        return None
    return re.compile(rf"\b(?:{'|'.join(alternatives)})\b", re.IGNORECASE)
