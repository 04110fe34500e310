"""Shared enums and types for moodlog."""

from enum import StrEnum


class Granularity(StrEnum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"

    @classmethod
    def parse(cls, value) -> "Granularity":
        """Coerce any value to a Granularity; unrecognized values mean day."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.DAY
