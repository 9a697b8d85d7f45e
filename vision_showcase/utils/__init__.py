"""Utility modules for the vision showcase backend."""

from .datetime_utils import utc_now, now_ms, now_iso, to_iso, ensure_utc, MonotonicMillis
from .ids import random_suffix, prefixed_id

__all__ = [
    "utc_now",
    "now_ms",
    "now_iso",
    "to_iso",
    "ensure_utc",
    "MonotonicMillis",
    "random_suffix",
    "prefixed_id",
]
