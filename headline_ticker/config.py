"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: HTTP fetching settings
- FilterConfig: Headline noise-filter thresholds and vocabulary
- DedupConfig: Near-duplicate detection settings
- DisplayConfig: Ticker rendering settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container (also holds the feed list)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
import os
from typing import Any

import yaml


CONFIG_ENV_VAR = "HEADLINE_TICKER_CONFIG"

DEFAULT_FEEDS = [
    "https://feeds.bbci.co.uk/news/world/rss.xml",
    "https://feeds.npr.org/1001/rss.xml",
    "https://www.theguardian.com/world/rss",
    "https://rss.nytimes.com/services/xml/rss/nyt/World.xml",
]

DEFAULT_NOISE_PHRASES = [
    "app",
    "play now",
    "tap to",
    "install",
    "download",
    "subscribe",
    "watch",
    "video",
    "live",
    "listen",
    "podcast",
    "newsletter",
    "breaking news",
    "top stories",
    "latest updates",
    "home",
]

DEFAULT_STOPWORDS = [
    "the", "a", "an", "and", "or", "but", "for", "nor", "to", "of",
    "in", "on", "at", "by", "from", "with", "as", "is", "are", "was",
    "were", "be", "been", "being", "this", "that", "these", "those", "it", "its",
    "their", "after", "before", "over", "under", "into", "about", "than", "then", "so",
    "if", "not",
]


class ConfigError(ValueError):
    """Raised when a configuration file cannot be loaded or holds invalid values."""


@dataclass
class FetchConfig:
    """Configuration for feed fetching.

    Attributes:
        timeout_seconds: Timeout for the single attempt made per feed
        concurrency: Maximum number of feeds fetched at the same time
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
    """

    timeout_seconds: float = 10.0
    concurrency: int = 4
    trust_env: bool = True
    user_agent: str = (
        "Mozilla/5.0 (X11; Linux x86_64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )


@dataclass
class FilterConfig:
    """Configuration for the headline noise filter.

    Attributes:
        min_length: Titles shorter than this many characters are rejected
        min_words: Titles with fewer whitespace-delimited words are rejected
        max_digits_length: Digit-only titles up to this length are rejected
        noise_phrases: Navigation/call-to-action phrases that mark a title as noise
    """

    min_length: int = 15
    min_words: int = 3
    max_digits_length: int = 4
    noise_phrases: list[str] = field(default_factory=lambda: list(DEFAULT_NOISE_PHRASES))


@dataclass
class DedupConfig:
    """Configuration for near-duplicate collapsing.

    Attributes:
        enabled: Whether to collapse near-duplicate headlines
        threshold: Jaccard similarity (0-1) at or above which titles are duplicates
        max_items: Maximum headlines kept after dedup (None for no cap)
        stopwords: Words ignored when fingerprinting a title
        min_token_length: Shortest token kept in a fingerprint
    """

    enabled: bool = True
    threshold: float = 0.7
    max_items: int | None = 25
    stopwords: list[str] = field(default_factory=lambda: list(DEFAULT_STOPWORDS))
    min_token_length: int = 3


@dataclass
class DisplayConfig:
    """Configuration for the ticker display.

    Attributes:
        mode: "console", "gui" or "list"
        include_descriptions: Append each description after its title
        separator: Text placed between consecutive headlines
        description_separator: Text placed between a title and its description
        width: Console window width in characters
        console_delay: Seconds between console scroll steps
        max_cycles: Number of full passes before the console ticker stops (None loops forever)
        gui_height: Height of the graphical bar in pixels
        gui_step: Pixels scrolled per graphical frame
        gui_interval_ms: Milliseconds between graphical frames
        gui_font: Tk font spec used for the graphical bar
        stop_file: If this file appears, the graphical bar closes itself
    """

    mode: str = "console"
    include_descriptions: bool = False
    separator: str = "  •  "
    description_separator: str = " — "
    width: int = 80
    console_delay: float = 0.1
    max_cycles: int | None = None
    gui_height: int = 32
    gui_step: int = 2
    gui_interval_ms: int = 20
    gui_font: str = "Helvetica 14 bold"
    stop_file: str | None = None


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Path of the log file
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "headline_ticker.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    feeds: list[str] = field(default_factory=lambda: list(DEFAULT_FEEDS))
    fetch: FetchConfig = field(default_factory=FetchConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    dedup: DedupConfig = field(default_factory=DedupConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    "fetch": FetchConfig,
    "filter": FilterConfig,
    "dedup": DedupConfig,
    "display": DisplayConfig,
    "logging": LoggingConfig,
}

_DISPLAY_MODES = {"console", "gui", "list"}

_FIELD_TYPES = {"bool": bool, "int": int, "float": (int, float), "str": str}


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults.

    Falls back to the file named by HEADLINE_TICKER_CONFIG when no path is
    given, and to the built-in defaults when neither is set.
    """
    path = path or os.getenv(CONFIG_ENV_VAR)
    if not path:
        return AppConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at the top level")

    cfg = _merge_config(AppConfig(), raw)
    validate_config(cfg)
    return cfg


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    sections = {}
    for name, cls in _SECTIONS.items():
        section = data[name]
        if not isinstance(section, dict):
            raise ConfigError(f"Section '{name}' must be a mapping")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(section) - known)
        if unknown:
            raise ConfigError(f"Unknown key(s) in section '{name}': {', '.join(unknown)}")
        sections[name] = cls(
            **{
                f.name: _check_type(f"{name}.{f.name}", section[f.name], f.type)
                for f in fields(cls)
                if f.name in section
            }
        )

    feeds = _check_type("feeds", data["feeds"] or [], "list[str]")
    return AppConfig(feeds=feeds, **sections)


def _check_type(where: str, value: Any, annotation: str) -> Any:
    """Check a YAML value against a dataclass field annotation.

    A single string is accepted where a list of strings is expected. Booleans
    are not accepted as numbers.
    """
    optional = annotation.endswith(" | None")
    expected = annotation.removesuffix(" | None")
    if value is None and optional:
        return None
    if expected == "list[str]":
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"{where} must be a list of strings")
        return list(value)

    types = _FIELD_TYPES[expected]
    if not isinstance(value, types) or (expected != "bool" and isinstance(value, bool)):
        raise ConfigError(f"{where} must be of type {expected}, got {value!r}")
    return value


def validate_config(cfg: AppConfig) -> None:
    """Reject values the pipeline cannot work with."""
    if not 0.0 <= cfg.dedup.threshold <= 1.0:
        raise ConfigError(f"dedup.threshold must be between 0 and 1, got {cfg.dedup.threshold}")
    if cfg.dedup.max_items is not None and cfg.dedup.max_items < 0:
        raise ConfigError(f"dedup.max_items must not be negative, got {cfg.dedup.max_items}")
    if cfg.fetch.concurrency < 1:
        raise ConfigError("fetch.concurrency must be at least 1")
    if cfg.fetch.timeout_seconds <= 0:
        raise ConfigError("fetch.timeout_seconds must be positive")
    if cfg.display.mode not in _DISPLAY_MODES:
        raise ConfigError(
            f"display.mode must be one of {', '.join(sorted(_DISPLAY_MODES))}, got {cfg.display.mode!r}"
        )
    if cfg.display.width < 1:
        raise ConfigError("display.width must be at least 1")
    if cfg.display.gui_step < 1:
        raise ConfigError("display.gui_step must be at least 1")
    if any(not isinstance(url, str) or not url.strip() for url in cfg.feeds):
        raise ConfigError("feeds must be a list of non-empty URLs")
