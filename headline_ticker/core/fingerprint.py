"""
Content-word fingerprints for headline comparison.

A fingerprint is the set of lowercase content words in a headline: tokens
of at least three characters that are not stopwords. Two headlines about
the same story tend to share most of their content words even when outlets
word them differently.
"""

from __future__ import annotations

import html
from typing import Iterable

from ..config import DEFAULT_STOPWORDS


DEFAULT_STOPWORD_SET = frozenset(DEFAULT_STOPWORDS)
DEFAULT_MIN_TOKEN_LENGTH = 3


def fingerprint(
    text: str | None,
    stopwords: Iterable[str] = DEFAULT_STOPWORD_SET,
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH,
) -> frozenset[str]:
    """Reduce text to its set of content words.

    Args:
        text: Headline text; entities are decoded before tokenizing
        stopwords: Words to drop regardless of length
        min_token_length: Shortest token to keep

    Returns:
        Frozen set of tokens; empty for empty or contentless input

    Examples:
        >>> sorted(fingerprint("The U.S. economy grew 3% in Q2"))
        ["economy", "grew"]
    """
    if not text:
        return frozenset()
    stop = stopwords if isinstance(stopwords, (set, frozenset)) else frozenset(stopwords)
    return frozenset(
        token
        for token in tokenize(text)
        if len(token) >= min_token_length and token not in stop
    )


def tokenize(text: str) -> list[str]:
    """Split text into lowercase letter/digit runs.

    Any character that is neither a Unicode letter, a decimal digit nor
    whitespace acts as a separator, so "U.S." yields ["u", "s"] and "10km²"
    yields ["10km"].
    """
    lowered = html.unescape(text).lower()
    cleaned = "".join(ch if ch.isalpha() or ch.isdecimal() or ch.isspace() else " " for ch in lowered)
    collapsed = " ".join(cleaned.split())
    if not collapsed:
        return []
    return collapsed.split(" ")
