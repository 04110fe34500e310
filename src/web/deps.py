"""Dependency injection for FastAPI routes."""

from functools import lru_cache

import structlog

from cli.config import get_db_path, load_config_model
from cli.config_models import MoodlogConfig
from mood.storage import EntryStore

logger = structlog.get_logger()


@lru_cache
def get_config() -> MoodlogConfig:
    """Load shared config from config.yaml (or defaults)."""
    return load_config_model()


@lru_cache
def _store_for(db_path: str) -> EntryStore:
    logger.info("web.store_opened", db_path=db_path)
    return EntryStore(db_path)


def get_store() -> EntryStore:
    """Entry store for the configured database path."""
    return _store_for(str(get_db_path(get_config())))


def get_window_overrides() -> dict[str, int]:
    return get_config().stats.window_days


def get_list_limit_cap() -> int:
    return get_config().stats.max_list_limit
