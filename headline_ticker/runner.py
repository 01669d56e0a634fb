"""
Main pipeline orchestration for the Headline Ticker.

This module coordinates the entire workflow:
1. Fetch all configured feeds concurrently (one attempt each)
2. Merge entries in configured feed order, then in-feed order
3. Normalize and filter titles
4. Collapse near-duplicate headlines and apply the output cap
5. Hand the result to the selected renderer

Fetch failures are absorbed at step 1; an empty result is displayed as an
idle ticker rather than treated as an error.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
import logging
from typing import Iterable

import httpx
from rich.console import Console

from .config import AppConfig
from .core.dedup import dedup_with_config
from .core.filter import prepare_item, rejection_reason
from .core.normalize import normalize_text
from .display.console import render_list, run_console_ticker
from .display.gui import run_gui_ticker
from .display.marquee import build_ticker_text
from .feeds.fetcher import fetch_feeds
from .logging_utils import log_event
from .types import FeedResult, HeadlineItem, RawFeedItem


@dataclass
class RunStats:
    """Statistics collected during one pipeline run.

    Attributes:
        feeds: Number of feeds requested
        feeds_ok: Feeds fetched and parsed successfully
        feeds_failed: Feeds that failed to fetch or parse
        raw_items: Entries extracted across all feeds
        accepted: Entries that passed the headline filter
        rejected: Rejected entry counts keyed by rejection reason
        kept: Headlines left after dedup and capping
    """
    feeds: int = 0
    feeds_ok: int = 0
    feeds_failed: int = 0
    raw_items: int = 0
    accepted: int = 0
    rejected: Counter = field(default_factory=Counter)
    kept: int = 0


def merge_feed_items(results: Iterable[FeedResult]) -> list[RawFeedItem]:
    """Concatenate feed entries in feed order, then in-feed order."""
    merged: list[RawFeedItem] = []
    for result in results:
        merged.extend(result.items)
    return merged


def select_headlines(
    raw_items: Iterable[RawFeedItem],
    cfg: AppConfig,
    stats: RunStats | None = None,
    logger: logging.Logger | None = None,
) -> list[HeadlineItem]:
    """Filter, normalize and deduplicate raw entries.

    Args:
        raw_items: Merged feed entries in processing order
        cfg: Application configuration (filter and dedup sections)
        stats: Optional statistics object to update
        logger: Logger for events

    Returns:
        Final headline list in processing order, capped at dedup.max_items
    """
    stats = stats if stats is not None else RunStats()
    accepted: list[HeadlineItem] = []
    for raw in raw_items:
        stats.raw_items += 1
        item = prepare_item(raw, cfg.filter)
        if item is None:
            reason = rejection_reason(normalize_text(raw.title), cfg.filter)
            stats.rejected[reason or "unknown"] += 1
            continue
        accepted.append(item)

    stats.accepted = len(accepted)
    log_event(
        logger,
        "Items filtered",
        event="items_filtered",
        raw=stats.raw_items,
        accepted=stats.accepted,
        rejected=dict(stats.rejected),
    )

    kept = dedup_with_config(accepted, cfg.dedup)
    stats.kept = len(kept)
    log_event(
        logger,
        "Dedup complete",
        event="dedup_complete",
        accepted=stats.accepted,
        kept=stats.kept,
        threshold=cfg.dedup.threshold,
        max_items=cfg.dedup.max_items,
    )
    return kept


def collect_headlines(
    cfg: AppConfig,
    logger: logging.Logger | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[list[HeadlineItem], RunStats]:
    """Fetch every configured feed and return the deduplicated headlines.

    Args:
        cfg: Application configuration
        logger: Logger for events
        transport: Optional httpx transport (used by tests)

    Returns:
        Tuple of (headlines, run statistics)
    """
    stats = RunStats(feeds=len(cfg.feeds))
    log_event(logger, "Pipeline start", event="pipeline_start", feeds=len(cfg.feeds))

    results = fetch_feeds(cfg.feeds, cfg.fetch, logger, transport=transport)
    stats.feeds_ok = sum(1 for result in results if result.ok)
    stats.feeds_failed = stats.feeds - stats.feeds_ok

    headlines = select_headlines(merge_feed_items(results), cfg, stats, logger)
    log_event(
        logger,
        "Pipeline complete",
        event="pipeline_complete",
        feeds_ok=stats.feeds_ok,
        feeds_failed=stats.feeds_failed,
        kept=stats.kept,
    )
    return headlines, stats


def display_headlines(
    items: list[HeadlineItem],
    cfg: AppConfig,
    console: Console | None = None,
) -> None:
    """Send headlines to the renderer selected by display.mode."""
    display = cfg.display
    if display.mode == "list":
        render_list(items, console, include_descriptions=display.include_descriptions)
        return

    text = build_ticker_text(
        items,
        include_descriptions=display.include_descriptions,
        separator=display.separator,
        description_separator=display.description_separator,
    )
    if display.mode == "gui":
        run_gui_ticker(text, display)
    else:
        run_console_ticker(text, display, console)


def render_run_stats(stats: RunStats, console: Console) -> None:
    """Display run statistics to the console."""
    console.print(
        "[bold]Run summary[/bold]: "
        f"feeds={stats.feeds}, ok={stats.feeds_ok}, failed={stats.feeds_failed}, "
        f"raw={stats.raw_items}, accepted={stats.accepted}, kept={stats.kept}"
    )
