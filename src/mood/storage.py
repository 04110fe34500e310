"""SQLite-backed storage for mood entries."""

import math
import sqlite3
from pathlib import Path
from typing import Optional

import structlog

from db import column_names, wal_connect
from mood.aggregator import summarize as aggregate
from mood.models import (
    MAX_SCORE,
    MAX_TS,
    MIN_SCORE,
    MIN_TS,
    AggregateResult,
    Bounds,
    Record,
    TimeRange,
    ts_to_iso,
)
from mood.ranges import last_days_range, now_ms

logger = structlog.get_logger()

DEFAULT_LIST_LIMIT = 500


def validate_score(score) -> int:
    """Return score as int, or raise ValueError if not an integer in range."""
    if isinstance(score, bool):
        raise ValueError("score must be integer between -10 and 10")
    try:
        as_float = float(score)
    except (TypeError, ValueError):
        raise ValueError("score must be integer between -10 and 10")
    if not as_float.is_integer() or not MIN_SCORE <= as_float <= MAX_SCORE:
        raise ValueError("score must be integer between -10 and 10")
    return int(as_float)


def validate_ts(ts) -> int:
    try:
        value = float(ts)
    except (TypeError, ValueError):
        raise ValueError("createdTs must be a number (milliseconds since epoch)")
    if not math.isfinite(value) or not MIN_TS <= value <= MAX_TS:
        raise ValueError("createdTs must be a number (milliseconds since epoch)")
    return int(value)


def _row_to_record(row: sqlite3.Row) -> Record:
    return Record(
        id=row["id"],
        created_ts=row["created_ts"],
        score=row["score"],
        note=row["note"],
        created_at=row["created_at"],
    )


class EntryStore:
    """SQLite persistence for mood entries.

    Each call opens its own connection, so one store can be shared across
    concurrent requests.
    """

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path).expanduser()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        with wal_connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS entries (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    created_at TEXT NOT NULL,
                    created_ts INTEGER NOT NULL,
                    score INTEGER NOT NULL CHECK(score BETWEEN -10 AND 10),
                    note TEXT
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_entries_created_at ON entries(created_at)")
            self._migrate(conn)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_entries_created_ts ON entries(created_ts)")

    def _migrate(self, conn: sqlite3.Connection) -> None:
        """Add and backfill created_ts on databases that predate it."""
        if "created_ts" in column_names(conn, "entries"):
            return
        conn.execute("ALTER TABLE entries ADD COLUMN created_ts INTEGER")
        cur = conn.execute(
            "UPDATE entries SET created_ts = CAST(strftime('%s', created_at) AS INTEGER) * 1000 "
            "WHERE created_ts IS NULL"
        )
        logger.info("entry_store.migrated_created_ts", backfilled=cur.rowcount)

    def add(
        self,
        score,
        note: Optional[str] = None,
        created_ts=None,
    ) -> Record:
        """Insert an entry. created_ts defaults to now."""
        score = validate_score(score)
        ts = now_ms() if created_ts is None else validate_ts(created_ts)
        if isinstance(note, str):
            note = note.strip() or None
        else:
            note = None
        created_at = ts_to_iso(ts)

        with wal_connect(self.db_path) as conn:
            cur = conn.execute(
                "INSERT INTO entries (created_at, created_ts, score, note) VALUES (?, ?, ?, ?)",
                (created_at, ts, score, note),
            )
            entry_id = cur.lastrowid
        logger.debug("entry_store.added", id=entry_id, created_ts=ts)
        return Record(id=entry_id, created_ts=ts, score=score, note=note, created_at=created_at)

    def list_entries(
        self,
        time_range: Optional[TimeRange] = None,
        from_ts: Optional[int] = None,
        to_ts: Optional[int] = None,
        limit: Optional[int] = DEFAULT_LIST_LIMIT,
    ) -> list[Record]:
        """Entries ascending by created_ts, optionally bounded (inclusive)."""
        if time_range is not None:
            from_ts, to_ts = time_range.from_ts, time_range.to_ts

        where, params = [], []
        if from_ts is not None:
            where.append("created_ts >= ?")
            params.append(int(from_ts))
        if to_ts is not None:
            where.append("created_ts <= ?")
            params.append(int(to_ts))

        sql = "SELECT * FROM entries"
        if where:
            sql += " WHERE " + " AND ".join(where)
        sql += " ORDER BY created_ts ASC, id ASC"
        if limit:
            sql += " LIMIT ?"
            params.append(int(limit))

        with wal_connect(self.db_path, row_factory=True) as conn:
            rows = conn.execute(sql, params).fetchall()
        return [_row_to_record(r) for r in rows]

    def get(self, entry_id: int) -> Optional[Record]:
        with wal_connect(self.db_path, row_factory=True) as conn:
            row = conn.execute("SELECT * FROM entries WHERE id = ?", (entry_id,)).fetchone()
        return _row_to_record(row) if row else None

    def delete(self, entry_id: int) -> bool:
        with wal_connect(self.db_path) as conn:
            cur = conn.execute("DELETE FROM entries WHERE id = ?", (entry_id,))
            deleted = cur.rowcount > 0
        if deleted:
            logger.debug("entry_store.deleted", id=entry_id)
        return deleted

    def bounds(self) -> Bounds:
        with wal_connect(self.db_path) as conn:
            first_ts, last_ts, count = conn.execute(
                "SELECT MIN(created_ts), MAX(created_ts), COUNT(*) FROM entries"
            ).fetchone()
        return Bounds(first_ts=first_ts, last_ts=last_ts, count=count)

    def summarize(
        self,
        time_range: Optional[TimeRange] = None,
        granularity="day",
        days: Optional[int] = None,
        default_window_days: Optional[int] = None,
    ) -> AggregateResult:
        """Aggregate stored entries.

        With an explicit range only those rows are loaded. ``days`` without a
        range means everything from N days ago onward, future entries
        included. Neither falls back to the
        default window ending at max(now, latest entry).
        """
        if time_range is None and days is not None:
            time_range = last_days_range(days)
        records = self.list_entries(time_range=time_range, limit=None)
        return aggregate(
            records,
            time_range=time_range,
            granularity=granularity,
            default_window_days=default_window_days,
        )
