"""Timezone utilities for storing timestamps as naive UTC"""
from datetime import datetime
import pytz


def utcnow() -> datetime:
    """Current time as a naive UTC datetime (the form stored in the database)."""
    return datetime.now(pytz.utc).replace(tzinfo=None)


def to_naive_utc(dt: datetime | None) -> datetime | None:
    """
    Normalize a datetime to naive UTC before it is stored or compared.

    Args:
        dt: Aware datetime in any zone, naive datetime assumed to be UTC, or None

    Returns:
        Naive UTC datetime, or None if input is None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(pytz.utc).replace(tzinfo=None)
