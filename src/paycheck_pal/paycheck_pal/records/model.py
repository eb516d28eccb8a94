from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import wall_clock
from ..common.validators import require_minute_of_day
from ..core.exceptions import InvalidIntervalError, ValidationError


def new_record_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class WorkRecord:
    """Domain entity: one completed work session.

    Derived pay fields (`total_seconds` .. `salary`) are produced by
    `payroll.recompute.recompute`; `work_date` is always the calendar day of
    `start_time` and cannot be passed in.
    """

    record_id: str
    start_time: datetime
    end_time: datetime
    total_seconds: int = 0
    hours_and_minutes_display: str = "0 hr 0 min"
    half_hour_decimal: float = 0.0
    hourly: float = 0.0
    salary: float = 0.0
    modified_hourly: bool = False
    description: str = ""
    uses_custom_pay_window: bool = False
    custom_pay_start_minutes: Optional[int] = None
    custom_pay_end_minutes: Optional[int] = None
    work_date: date = field(init=False)

    def __post_init__(self):
        # Records hold naive local times; an offset on input is dropped, not converted.
        object.__setattr__(self, "start_time", wall_clock(self.start_time))
        object.__setattr__(self, "end_time", wall_clock(self.end_time))
        if self.end_time <= self.start_time:
            raise InvalidIntervalError("End time must be after start time")
        if self.total_seconds < 0:
            raise ValidationError("total_seconds must not be negative")
        if self.uses_custom_pay_window:
            require_minute_of_day(self.custom_pay_start_minutes, "custom_pay_start_minutes")
            require_minute_of_day(self.custom_pay_end_minutes, "custom_pay_end_minutes")
        else:
            for name in ("custom_pay_start_minutes", "custom_pay_end_minutes"):
                value = getattr(self, name)
                if value is not None:
                    require_minute_of_day(value, name)
        object.__setattr__(self, "work_date", self.start_time.date())

    def in_month(self, year: int, month: int) -> bool:
        return self.work_date.year == int(year) and self.work_date.month == int(month)
