"""
Utility functions for agenttrace.
"""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """
    Get current UTC timestamp (timezone-aware).

    Returns:
        Current datetime in UTC timezone
    """
    return datetime.now(timezone.utc)


def format_timestamp(dt: datetime) -> str:
    """
    Format a datetime as ISO-8601 for trace output.

    Naive datetimes are assumed to be UTC.

    Args:
        dt: Datetime to format

    Returns:
        ISO-8601 string, e.g. "2024-05-01T12:30:00.123456+00:00"
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()
