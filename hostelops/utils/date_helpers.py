from datetime import datetime, timezone
from typing import Optional
import math

from .constants import AppConstants


class DateHelpers:
    @staticmethod
    def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
        """Normalize a datetime to naive UTC, the form stored in the database"""
        if value is None or value.tzinfo is None:
            return value
        return value.astimezone(timezone.utc).replace(tzinfo=None)

    @staticmethod
    def duration_ms(start: datetime, end: datetime) -> float:
        """Milliseconds elapsed between two datetimes"""
        return (end - start).total_seconds() * 1000

    @staticmethod
    def format_duration_ms(duration_ms: float) -> str:
        """Format milliseconds as whole hours and remaining minutes, e.g. '2h 30m'"""
        hours = math.floor(duration_ms / AppConstants.MS_PER_HOUR)
        minutes = math.floor(
            (duration_ms % AppConstants.MS_PER_HOUR) / AppConstants.MS_PER_MINUTE
        )
        return f"{hours}h {minutes}m"
