"""Shared fixtures for web API tests."""

import pytest
from fastapi.testclient import TestClient

from mood.storage import EntryStore


@pytest.fixture
def web_store(tmp_path):
    """Each test gets a fresh database."""
    return EntryStore(tmp_path / "web.sqlite3")


@pytest.fixture
def client(web_store):
    """Test client with the store dependency pointed at a temp database."""
    from web.app import app
    from web.deps import get_list_limit_cap, get_store, get_window_overrides

    app.dependency_overrides[get_store] = lambda: web_store
    app.dependency_overrides[get_window_overrides] = lambda: {}
    app.dependency_overrides[get_list_limit_cap] = lambda: 1000

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
