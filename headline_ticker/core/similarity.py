"""
Near-duplicate judgement between two headlines.

Two checks are combined:
1. Jaccard overlap of content-word fingerprints (same story, different wording)
2. Case-insensitive substring containment (same headline truncated or with
   an outlet suffix appended)
"""

from __future__ import annotations

from fractions import Fraction
from typing import Iterable

from .fingerprint import DEFAULT_MIN_TOKEN_LENGTH, DEFAULT_STOPWORD_SET, fingerprint
from .normalize import collapse_whitespace


DEFAULT_THRESHOLD = 0.7


def jaccard(a: frozenset[str], b: frozenset[str]) -> Fraction:
    """Return |a ∩ b| / |a ∪ b| as an exact fraction; 0 if either set is empty."""
    if not a or not b:
        return Fraction(0)
    return Fraction(len(a & b), len(a | b))


def contains_either(a: str, b: str) -> bool:
    """Check whether either string contains the other, ignoring case and spacing."""
    left = collapse_whitespace(a).lower()
    right = collapse_whitespace(b).lower()
    if not left or not right:
        return False
    return left in right or right in left


def is_near_duplicate(
    a: str,
    b: str,
    threshold: float = DEFAULT_THRESHOLD,
    stopwords: Iterable[str] = DEFAULT_STOPWORD_SET,
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH,
) -> bool:
    """Decide whether two headlines report the same story.

    Headlines without any content words are never judged duplicates of
    anything, whatever the threshold.

    Args:
        a: First headline, raw text
        b: Second headline, raw text
        threshold: Minimum Jaccard overlap (inclusive) for a word-overlap match
        stopwords: Words ignored when fingerprinting
        min_token_length: Shortest token kept in a fingerprint

    Returns:
        True if the headlines overlap enough or one contains the other
    """
    fp_a = fingerprint(a, stopwords, min_token_length)
    fp_b = fingerprint(b, stopwords, min_token_length)
    return judge_fingerprints(a, b, fp_a, fp_b, threshold)


def judge_fingerprints(
    a: str,
    b: str,
    fp_a: frozenset[str],
    fp_b: frozenset[str],
    threshold: float,
) -> bool:
    """Same verdict as is_near_duplicate, with both fingerprints precomputed."""
    if not fp_a or not fp_b:
        return False
    if float(jaccard(fp_a, fp_b)) >= threshold:
        return True
    return contains_either(a, b)
