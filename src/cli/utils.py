"""Shared CLI utilities."""

from datetime import datetime

import click
import structlog
from rich.console import Console

console = Console()
logger = structlog.get_logger()


def get_components() -> dict:
    """Initialize config and entry store."""
    from cli.config import get_db_path, load_config_model
    from mood.storage import EntryStore

    config_model = load_config_model()
    store = EntryStore(get_db_path(config_model))
    return {
        "config_model": config_model,
        "store": store,
    }


def parse_when(value: str | None) -> int | None:
    """ISO date/datetime option to epoch ms; naive values are local time."""
    if not value:
        return None
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        raise click.BadParameter(f"Could not parse {value!r}. Try ISO like '2026-02-25T07:34'.")
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return int(dt.timestamp() * 1000)


def fmt_ts(ts: int | None) -> str:
    """Epoch ms as local 'YYYY-MM-DD HH:MM'."""
    if ts is None:
        return "-"
    return datetime.fromtimestamp(ts / 1000).astimezone().strftime("%Y-%m-%d %H:%M")


def score_style(score: float) -> str:
    if score >= 3:
        return "green"
    if score <= -3:
        return "red"
    return "yellow"
