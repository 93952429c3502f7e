"""Time utilities for storage timestamps.

The catalogue tables store timestamps as ``YYYY-MM-DD HH:MM:SS`` strings in UTC.
An all-zero value (``0000-00-00 00:00:00``) or an empty string means "not set".
"""

from datetime import date, datetime, timezone
from typing import Optional

DB_FORMAT = "%Y-%m-%d %H:%M:%S"
ZERO_TIMESTAMPS = ("", "0000-00-00", "0000-00-00 00:00:00")


def as_utc(dt: datetime) -> datetime:
    """Aware UTC datetime; naive values are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_db_timestamp(dt: datetime) -> str:
    """
    Convert datetime to the storage timestamp format.

    Args:
        dt: Datetime object (naive values are taken as UTC)

    Returns:
        Timestamp string (e.g., '2011-03-25 15:51:05')
    """
    return as_utc(dt).strftime(DB_FORMAT)


def utc_now_db() -> str:
    """Current UTC time in the storage timestamp format."""
    return to_db_timestamp(datetime.now(timezone.utc))


def parse_db_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a storage timestamp into a timezone-aware UTC datetime.

    Returns:
        Datetime, or None for missing/zero timestamps

    Raises:
        ValueError: If the value is not in storage format
    """
    if value is None or value in ZERO_TIMESTAMPS:
        return None
    if len(value) == 10:
        return datetime.strptime(value, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    return datetime.strptime(value, DB_FORMAT).replace(tzinfo=timezone.utc)


def parse_db_date(value: Optional[str]) -> Optional[date]:
    """Parse a storage date (or timestamp) into a date, None when unset."""
    parsed = parse_db_timestamp(value)
    return parsed.date() if parsed else None
