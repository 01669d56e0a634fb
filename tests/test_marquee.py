"""Tests for ticker composition, scroll state and the console renderer."""

from __future__ import annotations

from rich.console import Console

from headline_ticker.config import DisplayConfig
from headline_ticker.display.console import render_list, run_console_ticker
from headline_ticker.display.marquee import MarqueeState, build_ticker_text, next_position
from headline_ticker.types import HeadlineItem


ITEMS = [
    HeadlineItem(title="Storm causes flooding across southern coast", description="Towns evacuated"),
    HeadlineItem(title="Museum reopens after lengthy renovation"),
]


def test_build_ticker_text_titles_only():
    assert build_ticker_text(ITEMS, separator=" | ") == (
        "Storm causes flooding across southern coast | Museum reopens after lengthy renovation"
    )


def test_build_ticker_text_with_descriptions_skips_missing_ones():
    text = build_ticker_text(ITEMS, include_descriptions=True, separator=" | ", description_separator=": ")
    assert text == (
        "Storm causes flooding across southern coast: Towns evacuated"
        " | Museum reopens after lengthy renovation"
    )


def test_build_ticker_text_empty():
    assert build_ticker_text([]) == ""


def test_marquee_window_loops_text_and_gap():
    state = MarqueeState(text="abc", gap="--")
    assert state.window(3) == "abc"
    assert state.window(7) == "abc--ab"
    assert state.window(12) == "abc--abc--ab"

    state.advance()
    assert state.window(3) == "bc-"


def test_marquee_counts_full_cycles():
    state = MarqueeState(text="abc", gap="--")
    for _ in range(5):
        state.advance()
    assert state.offset == 0
    assert state.cycles == 1


def test_marquee_step_wraps_offset():
    state = MarqueeState(text="abc", gap="--", step=2)
    offsets = []
    for _ in range(3):
        state.advance()
        offsets.append(state.offset)
    assert offsets == [2, 4, 1]
    assert state.cycles == 1


def test_marquee_empty_text():
    state = MarqueeState(text="")
    assert state.window(10) == ""
    state.advance()
    assert state.offset == 0
    assert state.cycles == 0


def test_next_position_moves_left_and_reenters_from_right():
    assert next_position(10, 2, 50, 100) == 8
    assert next_position(-48, 2, 50, 100) == -50
    assert next_position(-49, 2, 50, 100) == 100


def test_console_ticker_stops_after_max_cycles():
    console = Console(record=True, width=40)
    delays = []
    cfg = DisplayConfig(width=5, separator="--", max_cycles=2, console_delay=0.25)

    frames = run_console_ticker("abc", cfg, console, sleep=delays.append)

    assert frames == 10
    assert delays == [0.25] * 10


def test_console_ticker_stops_on_keyboard_interrupt():
    def interrupt(_delay):
        raise KeyboardInterrupt

    cfg = DisplayConfig(width=5, max_cycles=None)
    frames = run_console_ticker("abc", cfg, Console(record=True), sleep=interrupt)
    assert frames == 1


def test_console_ticker_idles_without_text():
    console = Console(record=True, width=80)
    assert run_console_ticker("", DisplayConfig(), console) == 0
    assert "No headlines to display" in console.export_text()


def test_render_list_empty():
    console = Console(record=True, width=80)
    render_list([], console)
    assert "No headlines to display" in console.export_text()


def test_render_list_hides_descriptions_by_default():
    console = Console(record=True, width=120)
    render_list(ITEMS, console)
    text = console.export_text()
    assert "2. Museum reopens after lengthy renovation" in text
    assert "Towns evacuated" not in text
