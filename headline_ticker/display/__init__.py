"""
Ticker renderers.

The console renderer and list printer depend only on rich; the graphical
bar needs tkinter and imports it on demand.
"""

from .console import render_list, run_console_ticker
from .gui import GuiTicker, run_gui_ticker
from .marquee import MarqueeState, build_ticker_text, next_position

__all__ = [
    "build_ticker_text",
    "GuiTicker",
    "MarqueeState",
    "next_position",
    "render_list",
    "run_console_ticker",
    "run_gui_ticker",
]
