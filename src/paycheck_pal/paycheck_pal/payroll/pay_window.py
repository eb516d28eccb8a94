from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..common.datetime_utils import minutes_to_hhmm, start_of_day
from ..common.validators import require_minute_of_day
from ..core.constants import DEFAULT_PAY_WINDOW_END_MINUTES, DEFAULT_PAY_WINDOW_START_MINUTES


@dataclass(frozen=True)
class PayWindowPolicy:
    """Daily recurring range during which work is paid.

    `start_minutes`/`end_minutes` are minutes since local midnight. A window whose
    end is not after its start (e.g. 22:00 -> 06:00) runs into the next day.
    """

    enabled: bool = False
    start_minutes: int = DEFAULT_PAY_WINDOW_START_MINUTES
    end_minutes: int = DEFAULT_PAY_WINDOW_END_MINUTES

    def __post_init__(self):
        require_minute_of_day(self.start_minutes, "start_minutes")
        require_minute_of_day(self.end_minutes, "end_minutes")
        object.__setattr__(self, "enabled", bool(self.enabled))

    @property
    def spans_midnight(self) -> bool:
        return self.end_minutes <= self.start_minutes

    def label(self) -> str:
        return f"{minutes_to_hhmm(self.start_minutes)}-{minutes_to_hhmm(self.end_minutes)}"


def window_bounds(start: datetime, window_start_min: int, window_end_min: int) -> tuple[datetime, datetime]:
    """Anchor a daily window to the calendar day of `start`."""
    midnight = start_of_day(start)
    window_start = midnight + timedelta(minutes=window_start_min)
    window_end = midnight + timedelta(minutes=window_end_min)
    if window_end <= window_start:
        window_end += timedelta(days=1)
    return window_start, window_end


def paid_seconds(
    start: datetime,
    end: datetime,
    enabled: bool,
    window_start_min: int,
    window_end_min: int,
) -> int:
    """Whole seconds of [start, end] that fall inside the pay window.

    Returns 0 for empty/negative intervals and for sessions entirely outside
    the window; with the window disabled the raw interval is paid.
    """
    if end <= start:
        return 0
    if not enabled:
        return int((end - start).total_seconds())

    window_start, window_end = window_bounds(start, window_start_min, window_end_min)
    effective_start = max(start, window_start)
    effective_end = min(end, window_end)
    return max(0, int((effective_end - effective_start).total_seconds()))


def paid_seconds_for_policy(start: datetime, end: datetime, policy: PayWindowPolicy) -> int:
    return paid_seconds(start, end, policy.enabled, policy.start_minutes, policy.end_minutes)
