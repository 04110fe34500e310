"""Mood entry CRUD routes wrapping src/mood/storage.py."""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from mood.storage import EntryStore
from web.deps import get_list_limit_cap, get_store
from web.models import DeleteResult, Entry, EntryCreate

logger = structlog.get_logger()

router = APIRouter(prefix="/api/entries", tags=["entries"])


@router.get("", response_model=list[Entry])
async def list_entries(
    limit: int = Query(500, ge=1),
    from_ts: Optional[int] = Query(None, alias="fromTs"),
    to_ts: Optional[int] = Query(None, alias="toTs"),
    store: EntryStore = Depends(get_store),
    limit_cap: int = Depends(get_list_limit_cap),
):
    try:
        records = store.list_entries(from_ts=from_ts, to_ts=to_ts, limit=min(limit, limit_cap))
    except Exception as e:
        logger.error("entries.list_error", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))
    return [r.to_dict() for r in records]


@router.post("", response_model=Entry, status_code=status.HTTP_201_CREATED)
async def create_entry(
    body: EntryCreate,
    store: EntryStore = Depends(get_store),
):
    try:
        record = store.add(body.score, note=body.note, created_ts=body.created_ts)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("entries.created", id=record.id, created_ts=record.created_ts)
    return record.to_dict()


@router.delete("/{entry_id}", response_model=DeleteResult)
async def delete_entry(
    entry_id: int,
    store: EntryStore = Depends(get_store),
):
    if not store.delete(entry_id):
        raise HTTPException(status_code=404, detail="not found")
    logger.info("entries.deleted", id=entry_id)
    return DeleteResult(ok=True)
