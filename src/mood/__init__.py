from .aggregator import summarize
from .models import AggregateResult, BucketSummary, Record, TimeRange
from .storage import EntryStore

__all__ = ["summarize", "AggregateResult", "BucketSummary", "Record", "TimeRange", "EntryStore"]
