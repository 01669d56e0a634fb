"""
Ticker text composition and scroll state.

Both renderers scroll the same composed string. MarqueeState holds all the
mutable scroll state for the console renderer; the graphical renderer keeps
its pixel position on its own ticker object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..types import HeadlineItem


DEFAULT_SEPARATOR = "  •  "
DEFAULT_DESCRIPTION_SEPARATOR = " — "


def build_ticker_text(
    items: Sequence[HeadlineItem],
    include_descriptions: bool = False,
    separator: str = DEFAULT_SEPARATOR,
    description_separator: str = DEFAULT_DESCRIPTION_SEPARATOR,
) -> str:
    """Join headlines into the single line the ticker scrolls.

    Args:
        items: Headlines in display order
        include_descriptions: Append each description after its title
        separator: Text between consecutive headlines
        description_separator: Text between a title and its description

    Returns:
        The composed line, or an empty string when there are no items
    """
    parts = []
    for item in items:
        if include_descriptions and item.description:
            parts.append(f"{item.title}{description_separator}{item.description}")
        else:
            parts.append(item.title)
    return separator.join(parts)


@dataclass
class MarqueeState:
    """Character-based scroll position over a looping line of text.

    The text is followed by `gap` and then repeats, so the window always
    shows a full width of characters once the text is non-empty.
    """

    text: str
    step: int = 1
    gap: str = DEFAULT_SEPARATOR
    offset: int = 0
    cycles: int = 0

    @property
    def loop(self) -> str:
        if not self.text:
            return ""
        return self.text + self.gap

    def window(self, width: int) -> str:
        loop = self.loop
        if not loop or width <= 0:
            return ""
        repeats = (self.offset + width) // len(loop) + 1
        return (loop * repeats)[self.offset : self.offset + width]

    def advance(self) -> None:
        loop = self.loop
        if not loop:
            return
        self.offset += self.step
        if self.offset >= len(loop):
            self.cycles += self.offset // len(loop)
            self.offset %= len(loop)


def next_position(x: int, step: int, text_width: int, canvas_width: int) -> int:
    """Move a left-scrolling text item by step pixels, re-entering from the right edge."""
    x -= step
    if x + text_width < 0:
        return canvas_width
    return x
