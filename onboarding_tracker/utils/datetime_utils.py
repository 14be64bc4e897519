"""
Date/time helpers shared by the storage and service layers.

All timestamps are timezone-aware UTC so that values read back from the
store compare cleanly with freshly generated ones.
"""
from datetime import date, datetime, time, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def start_of_day_utc(day: date) -> datetime:
    """Midnight UTC at the start of the given calendar day."""
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def epoch_millis(moment: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return int(moment.timestamp() * 1000)


def next_sequential_id(moment: datetime, last_id: Optional[int]) -> int:
    """
    Millisecond timestamp id that is strictly greater than last_id.

    Two calls within the same millisecond still produce distinct,
    increasing ids.
    """
    candidate = epoch_millis(moment)
    if last_id is not None and candidate <= last_id:
        return last_id + 1
    return candidate
