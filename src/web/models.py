"""Pydantic request/response schemas for the web API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# --- Entries ---


class EntryCreate(BaseModel):
    """New mood entry. Range checks on score happen in the store (400)."""

    model_config = ConfigDict(populate_by_name=True)

    score: float
    note: Optional[str] = Field(None, max_length=5000)
    created_ts: Optional[float] = Field(None, alias="createdTs")


class Entry(BaseModel):
    id: int
    created_at: str
    created_ts: int
    score: int
    note: Optional[str] = None


class DeleteResult(BaseModel):
    ok: bool = True


# --- Stats ---


class Bucket(BaseModel):
    key: str
    ts: int
    avg: float
    min: int
    max: int


class Stats(BaseModel):
    count: int
    avg: Optional[float] = None
    min: Optional[int] = None
    max: Optional[int] = None
    last: Optional[Entry] = None
    granularity: str
    series: list[Bucket] = []


class Meta(BaseModel):
    first_ts: Optional[int] = None
    last_ts: Optional[int] = None
    count: int = 0


class Health(BaseModel):
    ok: bool
    time: str
