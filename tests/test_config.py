"""Tests for config loading and validation."""

from pathlib import Path

import pytest

from cli.config import load_config_model
from cli.config_models import MoodlogConfig


def test_defaults(monkeypatch):
    monkeypatch.delenv("MOODLOG_DB", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    config = MoodlogConfig()
    assert config.paths.db == Path("~/moodlog/mood.sqlite3").expanduser()
    assert config.server.port == 4000
    assert config.stats.window_days == {}
    assert config.logging.level == "INFO"


def test_load_yaml(tmp_path, monkeypatch):
    monkeypatch.delenv("MOODLOG_DB", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text(
        "paths:\n"
        f"  db: {tmp_path / 'x.sqlite3'}\n"
        "stats:\n"
        "  window_days:\n"
        "    week: 90\n"
        "logging:\n"
        "  level: debug\n"
    )
    config = load_config_model(path)
    assert config.paths.db == tmp_path / "x.sqlite3"
    assert config.stats.window_days == {"week": 90}
    assert config.logging.level == "DEBUG"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MOODLOG_DB", str(tmp_path / "env.sqlite3"))
    monkeypatch.setenv("PORT", "8123")
    config = MoodlogConfig()
    assert config.paths.db == tmp_path / "env.sqlite3"
    assert config.server.port == 8123


def test_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("paths: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config_model(path)


@pytest.mark.parametrize(
    "body",
    [
        "stats:\n  window_days:\n    year: 10\n",
        "stats:\n  window_days:\n    day: 0\n",
        "logging:\n  level: LOUD\n",
        "server:\n  port: 70000\n",
    ],
)
def test_validation_errors(tmp_path, body):
    path = tmp_path / "config.yaml"
    path.write_text(body)
    with pytest.raises(ValueError, match="Config validation failed"):
        load_config_model(path)
