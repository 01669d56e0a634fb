"""
Feed fetching with concurrent fan-out over httpx.

Each configured feed gets exactly one timed attempt; there is no retry.
Failures never propagate: they come back as a FeedResult with the error
set and no items, and are logged as warnings. Results are returned in the
order the feeds were given, whatever order the requests completed in.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

import httpx

from ..config import FetchConfig
from ..logging_utils import log_event
from ..types import FeedResult
from .parser import FeedParseError, parse_feed


def categorize_error(exc: BaseException) -> str:
    """Categorize a fetch/parse exception for logging.

    Returns:
        Error category: "timeout", "http_error", "network_failed", "parse_failed", "unknown"
    """
    if isinstance(exc, httpx.TimeoutException):
        return "timeout"
    if isinstance(exc, httpx.HTTPStatusError):
        return "http_error"
    if isinstance(exc, httpx.TransportError):
        return "network_failed"
    if isinstance(exc, FeedParseError):
        return "parse_failed"
    return "unknown"


async def fetch_feed(
    client: httpx.AsyncClient,
    url: str,
    logger: logging.Logger | None = None,
) -> FeedResult:
    """Fetch and parse one feed with a single attempt.

    Args:
        client: Shared client carrying timeout, headers and proxy settings
        url: Feed address
        logger: Logger for fetch events

    Returns:
        FeedResult with items on success, or error details on failure
    """
    status_code: int | None = None
    try:
        resp = await client.get(url)
        status_code = resp.status_code
        resp.raise_for_status()
        items = parse_feed(resp.content, feed_url=url)
    except Exception as exc:  # noqa: BLE001
        category = categorize_error(exc)
        error = f"{type(exc).__name__}: {exc}"
        log_event(
            logger,
            "Feed failed",
            level=logging.WARNING,
            event="feed_failed",
            url=url,
            error=error,
            status_code=status_code,
            error_category=category,
        )
        return FeedResult(
            url=url,
            status_code=status_code,
            error=error,
            error_category=category,
        )

    log_event(
        logger,
        "Feed fetched",
        event="feed_fetched",
        url=url,
        status_code=status_code,
        items=len(items),
    )
    return FeedResult(url=url, items=items, status_code=status_code)


async def fetch_feeds_async(
    urls: Sequence[str],
    cfg: FetchConfig,
    logger: logging.Logger | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[FeedResult]:
    """Fetch all feeds concurrently, bounded by cfg.concurrency.

    Args:
        urls: Feed addresses in configured order
        cfg: Fetch settings
        logger: Logger for fetch events
        transport: Optional httpx transport (used by tests)

    Returns:
        One FeedResult per URL, in the same order as urls
    """
    if not urls:
        return []

    semaphore = asyncio.Semaphore(cfg.concurrency)

    async with httpx.AsyncClient(
        timeout=cfg.timeout_seconds,
        headers={"User-Agent": cfg.user_agent},
        follow_redirects=True,
        trust_env=cfg.trust_env,
        transport=transport,
    ) as client:

        async def _bounded(url: str) -> FeedResult:
            async with semaphore:
                return await fetch_feed(client, url, logger)

        # gather preserves argument order, which fixes the merge order.
        return await asyncio.gather(*(_bounded(url) for url in urls))


def fetch_feeds(
    urls: Sequence[str],
    cfg: FetchConfig,
    logger: logging.Logger | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[FeedResult]:
    """Synchronous wrapper around fetch_feeds_async."""
    return asyncio.run(fetch_feeds_async(urls, cfg, logger, transport))
