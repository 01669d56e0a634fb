"""Tests for YAML configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from headline_ticker.config import (
    CONFIG_ENV_VAR,
    DEFAULT_FEEDS,
    AppConfig,
    ConfigError,
    load_config,
)
from headline_ticker.core.filter import filter_title


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "ticker.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_path():
    cfg = load_config(None)
    assert isinstance(cfg, AppConfig)
    assert cfg.feeds == DEFAULT_FEEDS
    assert cfg.dedup.threshold == 0.7
    assert cfg.filter.min_length == 15
    assert cfg.filter.min_words == 3
    assert "breaking news" in cfg.filter.noise_phrases
    assert cfg.display.mode == "console"


def test_default_instances_do_not_share_lists():
    first = load_config(None)
    first.feeds.append("https://extra.example.com/rss")
    first.filter.noise_phrases.clear()
    second = load_config(None)
    assert second.feeds == DEFAULT_FEEDS
    assert second.filter.noise_phrases


def test_yaml_values_are_merged_over_defaults(tmp_path):
    path = _write(
        tmp_path,
        """
feeds:
  - https://a.example.com/rss
  - https://b.example.com/atom
dedup:
  threshold: 0.5
  max_items: null
display:
  mode: list
  include_descriptions: true
""",
    )
    cfg = load_config(str(path))
    assert cfg.feeds == ["https://a.example.com/rss", "https://b.example.com/atom"]
    assert cfg.dedup.threshold == 0.5
    assert cfg.dedup.max_items is None
    assert cfg.dedup.enabled is True
    assert cfg.display.mode == "list"
    assert cfg.display.include_descriptions is True
    assert cfg.display.width == 80
    assert cfg.fetch.timeout_seconds == 10.0


def test_single_feed_string_becomes_list(tmp_path):
    path = _write(tmp_path, "feeds: https://only.example.com/rss\n")
    assert load_config(str(path)).feeds == ["https://only.example.com/rss"]


def test_empty_file_gives_defaults(tmp_path):
    path = _write(tmp_path, "")
    assert load_config(str(path)) == AppConfig()


def test_unknown_top_level_key_is_ignored(tmp_path):
    path = _write(tmp_path, "unrelated: 1\ndedup:\n  threshold: 0.6\n")
    assert load_config(str(path)).dedup.threshold == 0.6


def test_env_var_names_config_file(tmp_path, monkeypatch):
    path = _write(tmp_path, "dedup:\n  max_items: 7\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert load_config(None).dedup.max_items == 7


@pytest.mark.parametrize(
    "text, message",
    [
        ("dedup:\n  threshhold: 0.5\n", "Unknown key"),
        ("dedup:\n  threshold: 1.5\n", "threshold"),
        ("dedup:\n  max_items: -1\n", "max_items"),
        ("display:\n  mode: hologram\n", "display.mode"),
        ("fetch:\n  concurrency: 0\n", "concurrency"),
        ("fetch: 3\n", "mapping"),
        ("- just\n- a list\n", "mapping"),
        ("feeds: [\n", "Invalid YAML"),
        ("feeds:\n  - ''\n", "feeds"),
        ("dedup:\n  threshold: high\n", "dedup.threshold"),
        ("dedup:\n  threshold: null\n", "dedup.threshold"),
        ("dedup:\n  max_items: ten\n", "dedup.max_items"),
        ("dedup:\n  stopwords: [1, 2]\n", "dedup.stopwords"),
        ("dedup:\n  enabled: maybe\n", "dedup.enabled"),
        ("fetch:\n  concurrency: true\n", "fetch.concurrency"),
        ("filter:\n  noise_phrases: {app: 1}\n", "filter.noise_phrases"),
        ("feeds: 5\n", "feeds"),
    ],
)
def test_invalid_config_raises(tmp_path, text, message):
    path = _write(tmp_path, text)
    with pytest.raises(ConfigError, match=message):
        load_config(str(path))


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(str(tmp_path / "missing.yaml"))


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_integer_accepted_for_float_field(tmp_path):
    path = _write(tmp_path, "dedup:\n  threshold: 1\nfetch:\n  timeout_seconds: 5\n")
    cfg = load_config(str(path))
    assert cfg.dedup.threshold == 1
    assert cfg.fetch.timeout_seconds == 5


def test_single_noise_phrase_string_becomes_list(tmp_path):
    path = _write(tmp_path, "filter:\n  noise_phrases: app\ndedup:\n  stopwords: the\n")
    cfg = load_config(str(path))
    assert cfg.filter.noise_phrases == ["app"]
    assert cfg.dedup.stopwords == ["the"]
    assert filter_title("Council approves a new budget plan", cfg.filter) is not None
    assert filter_title("Get the app for breaking alerts", cfg.filter) is None
