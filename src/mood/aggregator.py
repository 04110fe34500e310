"""Mood statistics: overall summary plus calendar-bucketed series."""

from collections import defaultdict
from typing import Iterable, Optional

import structlog

from mood.buckets import bucket_key, bucket_start_ts
from mood.models import AggregateResult, BucketSummary, Record, TimeRange
from mood.ranges import default_range, window_days_for
from shared_types import Granularity

logger = structlog.get_logger()


def summarize(
    records: Iterable[Record],
    time_range: Optional[TimeRange] = None,
    granularity="day",
    default_window_days: Optional[int] = None,
    now_ts: Optional[int] = None,
) -> AggregateResult:
    """Aggregate records into overall stats and a per-bucket series.

    Args:
        records: Records in any order; filtered here against the range.
        time_range: Inclusive bounds. None derives the default window ending
            at max(now, latest record).
        granularity: "day", "week" or "month"; anything else means day.
        default_window_days: Lookback used when time_range is None. Defaults
            to the per-granularity window.
        now_ts: Clock override in epoch ms, for the default range.

    Returns:
        AggregateResult with series sorted by bucket start. An empty or
        inverted range gives count 0 and null scalars.
    """
    g = Granularity.parse(granularity)
    records = list(records)

    if time_range is None:
        days = window_days_for(g) if default_window_days is None else default_window_days
        time_range = default_range(records, days, now_ts=now_ts)

    in_range = [r for r in records if time_range.contains(r.created_ts)]
    if not in_range:
        logger.debug(
            "stats.empty",
            granularity=str(g),
            from_ts=time_range.from_ts,
            to_ts=time_range.to_ts,
            inverted=time_range.inverted,
        )
        return AggregateResult.empty(g)

    total = 0
    lo = hi = in_range[0].score
    last = in_range[0]
    buckets: dict[str, list[int]] = defaultdict(list)
    for r in in_range:
        total += r.score
        lo = min(lo, r.score)
        hi = max(hi, r.score)
        if r.created_ts >= last.created_ts:
            last = r
        buckets[bucket_key(r.created_ts, g)].append(r.score)

    series = [
        BucketSummary(
            key=key,
            bucket_start_ts=bucket_start_ts(key, g),
            avg=sum(scores) / len(scores),
            min=min(scores),
            max=max(scores),
            scores=scores,
        )
        for key, scores in buckets.items()
    ]
    series.sort(key=lambda b: b.bucket_start_ts)

    count = len(in_range)
    return AggregateResult(
        granularity=g,
        count=count,
        avg=total / count,
        min=lo,
        max=hi,
        last=last,
        series=series,
    )
