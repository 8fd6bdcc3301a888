"""Clearing-time source.

The core never reads the wall clock itself: the host passes a timestamp into
each transition so replaying the same instructions with the same times gives
the same ledger.
"""

from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)
