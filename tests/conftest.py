"""Shared test fixtures for moodlog."""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def make_record():
    """Factory for Record objects with sequential ids."""
    from mood.models import Record

    counter = {"id": 0}

    def _make(created_ts: int, score: int, note=None):
        counter["id"] += 1
        return Record(id=counter["id"], created_ts=created_ts, score=score, note=note)

    return _make


@pytest.fixture
def store(tmp_path):
    """Fresh EntryStore on a temp database."""
    from mood.storage import EntryStore

    return EntryStore(tmp_path / "mood.sqlite3")
