"""UTC datetime helpers.

Survey creation times are stored and compared as timezone-aware UTC.
SQLite hands them back naive, so repositories normalize on read.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Normalize a datetime read from storage to aware UTC.

    - None stays None
    - Naive values are taken to be UTC already
    - Aware values are converted to UTC

    Args:
        dt: Datetime from the database or caller

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
