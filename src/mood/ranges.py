"""Time range defaults for stats queries."""

import time
from typing import Iterable, Optional

from mood.models import MS_PER_DAY, Record, TimeRange
from shared_types import Granularity

# Lookback shown for each granularity when no explicit range is given
DEFAULT_WINDOW_DAYS = {
    Granularity.DAY: 60,
    Granularity.WEEK: 26 * 7,
    Granularity.MONTH: 24 * 30,
}

# Past any timestamp a client can express as a JS number
UNBOUNDED_MS = 2**53


def now_ms() -> int:
    return int(time.time() * 1000)


def window_days_for(granularity, overrides: Optional[dict] = None) -> int:
    """Default lookback in days for a granularity, honoring config overrides."""
    g = Granularity.parse(granularity)
    if overrides and overrides.get(str(g)):
        return int(overrides[str(g)])
    return DEFAULT_WINDOW_DAYS[g]


def default_range(
    records: Iterable[Record],
    window_days: int,
    now_ts: Optional[int] = None,
) -> TimeRange:
    """Window of ``window_days`` ending at max(now, latest record).

    Ending at the latest record keeps future-dated entries visible.
    """
    to_ts = now_ms() if now_ts is None else now_ts
    for r in records:
        if r.created_ts > to_ts:
            to_ts = r.created_ts
    return TimeRange(from_ts=to_ts - window_days * MS_PER_DAY, to_ts=to_ts)


def last_days_range(days: int, now_ts: Optional[int] = None) -> TimeRange:
    """From ``days`` days ago onward; future-dated entries stay in range."""
    now = now_ms() if now_ts is None else now_ts
    return TimeRange(from_ts=now - days * MS_PER_DAY, to_ts=UNBOUNDED_MS)


def range_around(ts: int, granularity, overrides: Optional[dict] = None) -> TimeRange:
    """Default-width window for ``granularity`` centered on ``ts``."""
    days = window_days_for(granularity, overrides)
    half = max(1, round(days / 2)) * MS_PER_DAY
    return TimeRange(from_ts=ts - half, to_ts=ts + half)


def next_granularity(current, span_days: float) -> Granularity:
    """Granularity that suits a visible span after zooming.

    Narrow spans drop to finer buckets, wide spans climb to coarser ones.
    """
    g = Granularity.parse(current)
    nxt = g
    if g is Granularity.MONTH and span_days < 90:
        nxt = Granularity.WEEK
    if g is not Granularity.DAY and span_days < 21:
        nxt = Granularity.DAY
    if g is Granularity.DAY and span_days > 90:
        nxt = Granularity.MONTH
    elif g is Granularity.DAY and span_days > 45:
        nxt = Granularity.WEEK
    elif g is Granularity.WEEK and span_days > 180:
        nxt = Granularity.MONTH
    return nxt


def open_range(from_ts: Optional[int] = None, to_ts: Optional[int] = None) -> Optional[TimeRange]:
    """Range from optional bounds; a missing side is unbounded, both missing is None."""
    if from_ts is None and to_ts is None:
        return None
    return TimeRange(
        from_ts=-UNBOUNDED_MS if from_ts is None else int(from_ts),
        to_ts=UNBOUNDED_MS if to_ts is None else int(to_ts),
    )
