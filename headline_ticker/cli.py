"""
Command-line interface for the Headline Ticker.

Uses Typer to provide a CLI with options for the major configuration
settings. Supports loading .env files so HEADLINE_TICKER_CONFIG can point
at a config file.
"""

from __future__ import annotations

from dataclasses import asdict
import json
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
import typer

from .config import AppConfig, ConfigError, load_config, validate_config
from .logging_utils import setup_logging
from .runner import collect_headlines, display_headlines, render_run_stats

app = typer.Typer(add_completion=False, help="Scrolling ticker of deduplicated RSS/Atom headlines.")
console = Console()
err_console = Console(stderr=True)


ConfigOption = typer.Option(None, "--config", "-c", exists=True, dir_okay=False, help="YAML config file.")
FeedOption = typer.Option(None, "--feed", "-f", help="Feed URL (repeatable, replaces configured feeds).")
MaxItemsOption = typer.Option(None, "--max-items", "-n", help="Maximum headlines kept after dedup.")
ThresholdOption = typer.Option(None, "--threshold", help="Jaccard similarity threshold (0-1).")
DescriptionsOption = typer.Option(
    None, "--descriptions/--no-descriptions", help="Show descriptions after titles."
)
LogLevelOption = typer.Option(None, "--log-level", help="Logging level.")
LogFileOption = typer.Option(None, "--log-file/--no-log-file", help="Enable or disable file logging.")


@app.command()
def run(
    config: Path | None = ConfigOption,
    feed: list[str] | None = FeedOption,
    max_items: int | None = MaxItemsOption,
    threshold: float | None = ThresholdOption,
    display: str | None = typer.Option(
        None, "--display", "-d", help="Renderer: console, gui or list."
    ),
    descriptions: bool | None = DescriptionsOption,
    width: int | None = typer.Option(None, "--width", help="Console ticker width in characters."),
    delay: float | None = typer.Option(None, "--delay", help="Seconds between console scroll steps."),
    cycles: int | None = typer.Option(
        None, "--cycles", help="Stop the console ticker after this many passes."
    ),
    log_level: str | None = LogLevelOption,
    log_file: bool | None = LogFileOption,
    stats: bool = typer.Option(True, "--stats/--no-stats", help="Print a run summary."),
):
    """Fetch feeds, collapse duplicates and show the ticker."""
    cfg = _load(
        config,
        feed=feed,
        max_items=max_items,
        threshold=threshold,
        descriptions=descriptions,
        log_level=log_level,
        log_file=log_file,
    )
    if display:
        cfg.display.mode = display
    if width is not None:
        cfg.display.width = width
    if delay is not None:
        cfg.display.console_delay = delay
    if cycles is not None:
        cfg.display.max_cycles = cycles
    _validate(cfg)

    logger = setup_logging(cfg.logging, console)
    items, run_stats = collect_headlines(cfg, logger)
    if stats:
        render_run_stats(run_stats, console)
    display_headlines(items, cfg, console)


@app.command()
def headlines(
    config: Path | None = ConfigOption,
    feed: list[str] | None = FeedOption,
    max_items: int | None = MaxItemsOption,
    threshold: float | None = ThresholdOption,
    descriptions: bool | None = DescriptionsOption,
    as_json: bool = typer.Option(False, "--json", help="Print headlines as JSON."),
    log_level: str | None = LogLevelOption,
    log_file: bool | None = LogFileOption,
):
    """Fetch feeds, collapse duplicates and print the headlines once."""
    cfg = _load(
        config,
        feed=feed,
        max_items=max_items,
        threshold=threshold,
        descriptions=descriptions,
        log_level=log_level,
        log_file=log_file,
    )
    _validate(cfg)

    logger = setup_logging(cfg.logging, err_console)
    items, _ = collect_headlines(cfg, logger)
    if as_json:
        typer.echo(json.dumps([asdict(item) for item in items], ensure_ascii=False, indent=2))
        return
    cfg.display.mode = "list"
    display_headlines(items, cfg, console)


def _load(
    config: Path | None,
    feed: list[str] | None,
    max_items: int | None,
    threshold: float | None,
    descriptions: bool | None,
    log_level: str | None,
    log_file: bool | None,
) -> AppConfig:
    """Load configuration and apply CLI overrides shared by all commands."""
    # Load environment variables from .env if available
    load_dotenv()
    try:
        cfg = load_config(str(config) if config else None)
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=2) from exc

    if feed:
        cfg.feeds = list(feed)
    if max_items is not None:
        cfg.dedup.max_items = max_items
    if threshold is not None:
        cfg.dedup.threshold = threshold
    if descriptions is not None:
        cfg.display.include_descriptions = descriptions
    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.file = log_file
    return cfg


def _validate(cfg: AppConfig) -> None:
    try:
        validate_config(cfg)
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=2) from exc


if __name__ == "__main__":
    app()
