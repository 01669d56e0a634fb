"""
Plain-text normalization for feed titles and descriptions.

Feed fields frequently carry inline markup, HTML entities and stray line
breaks. Everything downstream (filtering, fingerprinting, display) works on
the single-line plain text produced here.
"""

from __future__ import annotations

import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning


BLOCK_TAGS = [
    "address", "article", "blockquote", "br", "dd", "div", "dl", "dt",
    "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hr", "li", "ol", "p", "pre", "section", "table", "td", "th",
    "tr", "ul",
]


def normalize_text(value: str | None) -> str | None:
    """Convert a raw feed field to single-line plain text.

    Removes markup tags, decodes HTML entities and collapses every run of
    whitespace (including newlines) to one space.

    Args:
        value: Raw title or description text, possibly None

    Returns:
        The cleaned text, or None if the input was absent or nothing
        remained after cleaning

    Examples:
        >>> normalize_text("<b>Storm</b> hits &amp; floods\\n coast")
        "Storm hits & floods coast"
        >>> normalize_text("   ")
        None
    """
    if not value:
        return None
    if "<" in value or "&" in value:
        value = strip_markup(value)
    cleaned = collapse_whitespace(value)
    return cleaned or None


def strip_markup(html: str) -> str:
    """Return the text content of an HTML fragment with entities decoded."""
    with warnings.catch_warnings():
        # Short titles that look like URLs or file names are still text.
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    # Inline tags vanish without a trace; block tags still separate words.
    for tag in soup.find_all(BLOCK_TAGS):
        tag.insert_before(" ")
        tag.insert_after(" ")
    return soup.get_text()


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())
