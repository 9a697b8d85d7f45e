"""
DateTime Utilities
==================

Consistent timestamp handling across the application. Everything is UTC:
datetimes are timezone-aware, epoch values are integer milliseconds and ISO
strings end in "Z" with millisecond precision.
"""
import threading
import time
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """Current UTC time as a timezone-aware datetime."""
    return datetime.now(dt_timezone.utc)


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    Naive values are taken to be UTC, which is what PyMongo returns for BSON dates.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert a datetime to an ISO 8601 string with milliseconds, e.g. "2025-12-24T10:30:00.123Z".
    """
    if dt is None:
        return None
    dt = ensure_utc(dt)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_iso() -> str:
    return to_iso(utc_now())


class MonotonicMillis:
    """
    Epoch-millisecond ids that never repeat within the process.

    Two calls in the same millisecond get consecutive values.
    """

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = max(now_ms(), self._last + 1)
            self._last = value
            return value
