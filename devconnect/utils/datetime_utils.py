"""
Centralized DateTime Utilities
==============================

All timestamps persisted by the application are timezone-aware UTC.

Functions:
- utc_now(): Current UTC time (for created-at stamps)
- ensure_utc(): Normalize a datetime read back from MongoDB
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    BSON dates have millisecond precision, so microseconds are truncated to
    keep in-memory values equal to what is read back.
    """
    now = datetime.now(dt_timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)
