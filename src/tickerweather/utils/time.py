# src/tickerweather/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime


class TimeUtils:
    """Time-related utility functions."""

    @staticmethod
    def now_utc() -> datetime:
        """Get current datetime in UTC.

        Returns:
            Timezone-aware datetime in UTC
        """
        return datetime.now(UTC)

    @staticmethod
    def to_iso_z(dt: datetime) -> str:
        """Format a datetime as ISO-8601 UTC with milliseconds and a ``Z``.

        Naive datetimes are assumed to already be UTC.

        Args:
            dt: Datetime to format

        Returns:
            String such as ``2025-05-03T14:30:00.000Z``
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        dt = dt.astimezone(UTC)
        return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
