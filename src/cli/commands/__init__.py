"""CLI command modules."""

from .entries import add, delete, list_entries
from .serve import serve
from .stats import stats

__all__ = [
    "add",
    "list_entries",
    "delete",
    "stats",
    "serve",
]
