"""
Time helpers for epoch-millisecond candle timestamps.

All series timestamps are UTC epoch milliseconds. These helpers keep the
conversions between dates, seconds and calendar-day keys in one place.
"""

from datetime import date, datetime, timezone
from typing import Callable, Union

MS_PER_SECOND = 1000
MS_PER_DAY = 24 * 60 * 60 * MS_PER_SECOND

Clock = Callable[[], int]


def now_ms() -> int:
    """Current wall-clock time as epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * MS_PER_SECOND)


def date_to_ms(value: Union[str, date, datetime]) -> int:
    """
    Convert an ISO date (``"2020-01-01"``), date or datetime to epoch milliseconds.

    Naive values are interpreted as UTC midnight / UTC wall time.
    """
    if isinstance(value, str):
        value = date.fromisoformat(value)
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * MS_PER_SECOND)


def ms_to_epoch_seconds(timestamp_ms: int) -> int:
    """Truncate epoch milliseconds to whole epoch seconds."""
    return timestamp_ms // MS_PER_SECOND


def epoch_seconds_to_ms(seconds: Union[int, float]) -> int:
    """Convert upstream epoch seconds to epoch milliseconds."""
    return int(seconds * MS_PER_SECOND)


def day_key(timestamp_ms: int) -> int:
    """UTC calendar-day index of a timestamp."""
    return timestamp_ms // MS_PER_DAY


def format_ms_iso(timestamp_ms: int) -> str:
    """Format epoch milliseconds as an ISO8601 UTC string."""
    return datetime.fromtimestamp(timestamp_ms / MS_PER_SECOND, tz=timezone.utc).isoformat()
