from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import ValidationError


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 local timestamp (no timezone conversion)."""
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid timestamp: {value!r}") from e
    return wall_clock(parsed)


def wall_clock(value: datetime) -> datetime:
    """Drop any UTC offset, keeping the wall-clock reading as local time."""
    if value.tzinfo is not None:
        return value.replace(tzinfo=None)
    return value


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def start_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min, tzinfo=value.tzinfo)


def minutes_to_hhmm(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def hhmm_to_minutes(value: str) -> int:
    """Parse HH:MM into minutes since midnight."""
    try:
        parsed = datetime.strptime(value.strip(), "%H:%M")
    except (AttributeError, ValueError) as e:
        raise ValidationError(f"Invalid time of day: {value!r}") from e
    return parsed.hour * 60 + parsed.minute


def shift_month(today: date, offset: int) -> tuple[int, int]:
    """Return (year, month) `offset` months away from `today`'s month."""
    index = today.year * 12 + (today.month - 1) + int(offset)
    return index // 12, index % 12 + 1


def is_minute_of_day(value: Optional[int]) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < MINUTES_PER_DAY
