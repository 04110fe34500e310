"""Data models for mood records and aggregation results."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from shared_types import Granularity

MIN_SCORE = -10
MAX_SCORE = 10
MS_PER_DAY = 86_400_000

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Storable timestamps; week and month buckets of these stay inside datetime's years
MIN_TS = (datetime(1, 1, 8, tzinfo=timezone.utc) - _EPOCH) // timedelta(milliseconds=1)
MAX_TS = (datetime(9999, 12, 24, tzinfo=timezone.utc) - _EPOCH) // timedelta(milliseconds=1)


def ts_to_iso(ts: int) -> str:
    """Render epoch milliseconds as ISO-8601 UTC with millisecond precision."""
    dt = _EPOCH + timedelta(milliseconds=ts)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Record:
    """A single mood entry as stored."""

    id: int
    created_ts: int
    score: int
    note: Optional[str] = None
    created_at: str = ""

    def __post_init__(self):
        if not self.created_at:
            object.__setattr__(self, "created_at", ts_to_iso(self.created_ts))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "created_at": self.created_at,
            "created_ts": self.created_ts,
            "score": self.score,
            "note": self.note,
        }


@dataclass(frozen=True)
class TimeRange:
    """Inclusive [from_ts, to_ts] window in epoch milliseconds."""

    from_ts: int
    to_ts: int

    @property
    def inverted(self) -> bool:
        return self.from_ts > self.to_ts

    def contains(self, ts: int) -> bool:
        return self.from_ts <= ts <= self.to_ts


@dataclass
class BucketSummary:
    key: str
    bucket_start_ts: int
    avg: float
    min: int
    max: int
    scores: list[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.scores)

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: ``ts`` aliases bucket_start_ts."""
        return {
            "key": self.key,
            "ts": self.bucket_start_ts,
            "avg": self.avg,
            "min": self.min,
            "max": self.max,
        }


@dataclass
class AggregateResult:
    """Overall stats plus the per-bucket series, oldest bucket first."""

    granularity: Granularity
    count: int = 0
    avg: Optional[float] = None
    min: Optional[int] = None
    max: Optional[int] = None
    last: Optional[Record] = None
    series: list[BucketSummary] = field(default_factory=list)

    @classmethod
    def empty(cls, granularity: Granularity) -> "AggregateResult":
        return cls(granularity=granularity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "avg": self.avg,
            "min": self.min,
            "max": self.max,
            "last": self.last.to_dict() if self.last else None,
            "granularity": str(self.granularity),
            "series": [b.to_dict() for b in self.series],
        }


@dataclass(frozen=True)
class Bounds:
    """Earliest/latest timestamps and total entry count in the store."""

    first_ts: Optional[int]
    last_ts: Optional[int]
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"first_ts": self.first_ts, "last_ts": self.last_ts, "count": self.count}
