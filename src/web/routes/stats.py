"""Mood statistics and store metadata routes."""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query

from mood.ranges import open_range, window_days_for
from mood.storage import EntryStore
from web.deps import get_store, get_window_overrides
from web.models import Meta, Stats

logger = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["stats"])


@router.get("/stats", response_model=Stats)
async def get_stats(
    granularity: str = "day",
    from_ts: Optional[int] = Query(None, alias="fromTs"),
    to_ts: Optional[int] = Query(None, alias="toTs"),
    days: Optional[int] = Query(None, ge=1),
    store: EntryStore = Depends(get_store),
    overrides: dict = Depends(get_window_overrides),
):
    """Overall mood stats plus a day/week/month bucketed series.

    Unknown granularity values are served as day buckets.
    """
    try:
        result = store.summarize(
            time_range=open_range(from_ts, to_ts),
            granularity=granularity,
            days=days,
            default_window_days=window_days_for(granularity, overrides),
        )
    except Exception as e:
        logger.error("stats.error", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))
    return result.to_dict()


@router.get("/meta", response_model=Meta)
async def get_meta(store: EntryStore = Depends(get_store)):
    """First/last entry timestamps and total count."""
    try:
        return store.bounds().to_dict()
    except Exception as e:
        logger.error("meta.error", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))
