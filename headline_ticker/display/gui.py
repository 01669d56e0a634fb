"""
Graphical ticker: a borderless, always-on-top scrolling bar.

tkinter is imported only when the bar is created so that headless
environments can use every other part of the package. All drawing state
lives on the GuiTicker instance.

The bar can be dragged with the mouse and closes on Escape, on a
double-click, or when the configured stop file appears.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..config import DisplayConfig
from .marquee import next_position


STOP_FILE_POLL_MS = 1000

logger = logging.getLogger(__name__)


class GuiTicker:
    """Owns the Tk window, canvas and scroll position of one ticker bar."""

    def __init__(self, root: Any, text: str, cfg: DisplayConfig) -> None:
        import tkinter as tk

        self.root = root
        self.cfg = cfg
        self.text = text
        self.width = root.winfo_screenwidth()
        self.x = self.width
        self._drag_offset: tuple[int, int] | None = None
        self._closed = False

        root.overrideredirect(True)
        root.attributes("-topmost", True)
        root.geometry(f"{self.width}x{cfg.gui_height}+0+0")

        self.canvas = tk.Canvas(
            root,
            width=self.width,
            height=cfg.gui_height,
            bg="black",
            highlightthickness=0,
        )
        self.canvas.pack(fill="both", expand=True)
        self.item = self.canvas.create_text(
            self.x,
            cfg.gui_height // 2,
            text=text,
            anchor="w",
            fill="white",
            font=cfg.gui_font,
        )

        root.bind("<Escape>", self.close)
        self.canvas.bind("<Double-Button-1>", self.close)
        self.canvas.bind("<ButtonPress-1>", self._start_drag)
        self.canvas.bind("<B1-Motion>", self._drag)

    def start(self) -> None:
        self.root.after(self.cfg.gui_interval_ms, self.tick)
        if self.cfg.stop_file:
            self.root.after(STOP_FILE_POLL_MS, self._poll_stop_file)

    def tick(self) -> None:
        if self._closed:
            return
        bbox = self.canvas.bbox(self.item)
        text_width = bbox[2] - bbox[0] if bbox else 0
        new_x = next_position(self.x, self.cfg.gui_step, text_width, self.width)
        self.canvas.move(self.item, new_x - self.x, 0)
        self.x = new_x
        self.root.after(self.cfg.gui_interval_ms, self.tick)

    def close(self, _event: Any = None) -> None:
        if self._closed:
            return
        self._closed = True
        self.root.destroy()

    def _start_drag(self, event: Any) -> None:
        self._drag_offset = (
            event.x_root - self.root.winfo_x(),
            event.y_root - self.root.winfo_y(),
        )

    def _drag(self, event: Any) -> None:
        if self._drag_offset is None:
            return
        dx, dy = self._drag_offset
        self.root.geometry(f"+{event.x_root - dx}+{event.y_root - dy}")

    def _poll_stop_file(self) -> None:
        if self._closed:
            return
        if Path(self.cfg.stop_file).exists():
            logger.info("Stop file found, closing ticker", extra={"event": "gui_stop_file"})
            self.close()
            return
        self.root.after(STOP_FILE_POLL_MS, self._poll_stop_file)


def run_gui_ticker(text: str, cfg: DisplayConfig) -> None:
    """Show the graphical ticker bar and block until it is closed.

    Does nothing when there is no text to show.
    """
    if not text:
        logger.info("No headlines to display", extra={"event": "gui_idle"})
        return

    import tkinter as tk

    root = tk.Tk()
    root.title("Headline Ticker")
    ticker = GuiTicker(root, text, cfg)
    ticker.start()
    root.mainloop()
