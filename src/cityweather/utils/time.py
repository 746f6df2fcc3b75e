# src/cityweather/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime, time
from typing import Final

SECONDS_PER_DAY: Final = 86400


class TimeUtils:
    """Time-related utility functions.

    OpenWeather reports instants as UNIX seconds and the location's zone as a
    plain offset in seconds, so everything here works with fixed offsets
    rather than a timezone database.
    """

    @staticmethod
    def epoch_to_datetime(timestamp: int) -> datetime:
        """Convert UNIX timestamp to UTC datetime with timezone information.

        Args:
            timestamp: UNIX timestamp (seconds since epoch)

        Returns:
            Timezone-aware datetime object in UTC
        """
        return datetime.fromtimestamp(timestamp, tz=UTC)

    @staticmethod
    def local_time_of_day(dt: datetime, offset_seconds: int) -> time:
        """Return the wall-clock time at a fixed UTC offset.

        Only the time of day is kept, so any offset is accepted, including
        ones far outside ±24h.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        seconds = (int(dt.timestamp()) + offset_seconds % SECONDS_PER_DAY) % SECONDS_PER_DAY
        return time(seconds // 3600, seconds % 3600 // 60, seconds % 60)

    @staticmethod
    def format_clock(value: datetime | time) -> str:
        """Format a time of day as ``h:mm AM`` without a leading zero."""
        return value.strftime("%I:%M %p").lstrip("0")

    @classmethod
    def format_local_time(cls, dt: datetime, offset_seconds: int) -> str:
        """Format *dt* as a 12-hour wall-clock time at *offset_seconds* from UTC.

        Args:
            dt: Instant to format (naive values are treated as UTC)
            offset_seconds: Location offset from UTC in seconds

        Returns:
            Formatted time of day (e.g. "7:04 AM")
        """
        return cls.format_clock(cls.local_time_of_day(dt, offset_seconds))
