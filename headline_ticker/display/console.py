"""
Text-console renderers: a scrolling marquee and a plain list.
"""

from __future__ import annotations

import time
from typing import Callable, Sequence

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.text import Text

from ..config import DisplayConfig
from ..types import HeadlineItem
from .marquee import MarqueeState


def run_console_ticker(
    text: str,
    cfg: DisplayConfig,
    console: Console | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Scroll text through a fixed-width window until stopped.

    Runs until cfg.max_cycles full passes have been shown, or forever when
    max_cycles is None. Ctrl-C stops the ticker without an error.

    Args:
        text: Composed ticker line
        cfg: Display settings (width, console_delay, separator, max_cycles)
        console: Rich console to draw on
        sleep: Delay function between frames

    Returns:
        Number of frames drawn
    """
    console = console or Console()
    if not text:
        console.print("[dim]No headlines to display.[/dim]")
        return 0

    state = MarqueeState(text=text, gap=cfg.separator)
    frames = 0
    try:
        with Live(Text(state.window(cfg.width)), console=console, auto_refresh=False) as live:
            while cfg.max_cycles is None or state.cycles < cfg.max_cycles:
                live.update(Text(state.window(cfg.width), no_wrap=True), refresh=True)
                frames += 1
                sleep(cfg.console_delay)
                state.advance()
    except KeyboardInterrupt:
        pass
    return frames


def render_list(
    items: Sequence[HeadlineItem],
    console: Console | None = None,
    include_descriptions: bool = False,
) -> None:
    """Print headlines once as a numbered list."""
    console = console or Console()
    if not items:
        console.print("[dim]No headlines to display.[/dim]")
        return
    for index, item in enumerate(items, start=1):
        console.print(f"[bold]{index:>2}.[/bold] {escape(item.title)}", highlight=False)
        if include_descriptions and item.description:
            console.print(f"    [dim]{escape(item.description)}[/dim]", highlight=False)
