"""Tests for stats and meta API routes."""

from unittest.mock import MagicMock

from mood.ranges import now_ms
from web.deps import get_store

DAY = 86_400_000
BASE = 1_709_251_200_000  # 2024-03-01T00:00:00Z


def _seed(client):
    for ts, score in [
        (BASE + 9 * 3_600_000, -5),
        (BASE + 10 * 3_600_000, 5),
        (BASE + DAY, 0),
    ]:
        client.post("/api/entries", json={"score": score, "createdTs": ts})


def test_stats_day(client):
    _seed(client)
    res = client.get("/api/stats", params={"fromTs": BASE, "toTs": BASE + 2 * DAY})
    assert res.status_code == 200
    data = res.json()
    assert data["count"] == 3
    assert data["avg"] == 0
    assert data["min"] == -5
    assert data["max"] == 5
    assert data["granularity"] == "day"
    assert data["last"]["score"] == 0
    assert data["series"] == [
        {"key": "2024-03-01", "ts": BASE, "avg": 0, "min": -5, "max": 5},
        {"key": "2024-03-02", "ts": BASE + DAY, "avg": 0, "min": 0, "max": 0},
    ]


def test_stats_week_year_boundary(client):
    new_year = 1_609_459_200_000  # 2021-01-01T00:00:00Z
    client.post("/api/entries", json={"score": 3, "createdTs": new_year})
    res = client.get(
        "/api/stats",
        params={"granularity": "week", "fromTs": new_year - DAY, "toTs": new_year + DAY},
    )
    series = res.json()["series"]
    assert series == [{"key": "2020-W53", "ts": 1_609_113_600_000, "avg": 3, "min": 3, "max": 3}]


def test_stats_empty(client):
    res = client.get("/api/stats", params={"granularity": "month", "fromTs": 0, "toTs": 1})
    assert res.json() == {
        "count": 0,
        "avg": None,
        "min": None,
        "max": None,
        "last": None,
        "granularity": "month",
        "series": [],
    }


def test_stats_unknown_granularity_is_day(client):
    _seed(client)
    res = client.get("/api/stats", params={"granularity": "decade", "fromTs": BASE, "toTs": BASE + 2 * DAY})
    assert res.status_code == 200
    assert res.json()["granularity"] == "day"
    assert len(res.json()["series"]) == 2


def test_stats_inverted_range(client):
    _seed(client)
    res = client.get("/api/stats", params={"fromTs": BASE + DAY, "toTs": BASE})
    assert res.status_code == 200
    assert res.json()["count"] == 0


def test_stats_default_window(client):
    client.post("/api/entries", json={"score": 4})
    res = client.get("/api/stats", params={"granularity": "week"})
    assert res.json()["count"] == 1


def test_stats_store_error(client):
    from web.app import app

    broken = MagicMock()
    broken.summarize.side_effect = RuntimeError("disk gone")
    app.dependency_overrides[get_store] = lambda: broken
    res = client.get("/api/stats")
    assert res.status_code == 500
    assert res.json()["detail"] == "disk gone"


def test_meta(client):
    assert client.get("/api/meta").json() == {"first_ts": None, "last_ts": None, "count": 0}
    _seed(client)
    assert client.get("/api/meta").json() == {
        "first_ts": BASE + 9 * 3_600_000,
        "last_ts": BASE + DAY,
        "count": 3,
    }


def test_stats_days_keeps_future_entries(client):
    now = now_ms()
    client.post("/api/entries", json={"score": 7, "createdTs": now + 5 * DAY})
    client.post("/api/entries", json={"score": -7, "createdTs": now - 90 * DAY})
    data = client.get("/api/stats", params={"days": 30}).json()
    assert data["count"] == 1
    assert data["last"]["score"] == 7
