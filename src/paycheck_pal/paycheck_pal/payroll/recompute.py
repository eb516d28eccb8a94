from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Optional

from ..common.validators import require_non_negative_number
from ..records.model import WorkRecord, new_record_id
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import PayWindowCalculator
from .pay_window import PayWindowPolicy
from .time_math import format_duration, half_hour_floor

_DEFAULT_CALCULATOR = PayWindowCalculator()


def recompute(
    record: WorkRecord,
    hourly: float,
    policy: PayWindowPolicy,
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> WorkRecord:
    """Return a copy of `record` with payable time and pay derived again.

    Only the timing/pay fields and the applied `hourly` change; the protection
    flag, description, date and custom-window settings are carried over.
    """
    hourly = require_non_negative_number(hourly, "hourly")
    payable = (calculator or _DEFAULT_CALCULATOR).paid_seconds(record, policy)
    half = half_hour_floor(payable)
    return dataclasses.replace(
        record,
        total_seconds=payable,
        hours_and_minutes_display=format_duration(payable),
        half_hour_decimal=half,
        hourly=hourly,
        salary=half * hourly,
    )


def build_record(
    *,
    start_time: datetime,
    end_time: datetime,
    hourly: float,
    policy: PayWindowPolicy,
    description: str = "",
    modified_hourly: bool = False,
    uses_custom_pay_window: bool = False,
    custom_pay_start_minutes: Optional[int] = None,
    custom_pay_end_minutes: Optional[int] = None,
    record_id: Optional[str] = None,
    calculator: Optional[PayrollCalculator] = None,
) -> WorkRecord:
    """Construct a fully-derived record (raises InvalidIntervalError for end <= start)."""
    record = WorkRecord(
        record_id=record_id or new_record_id(),
        start_time=start_time,
        end_time=end_time,
        modified_hourly=bool(modified_hourly),
        description=description or "",
        uses_custom_pay_window=bool(uses_custom_pay_window),
        custom_pay_start_minutes=custom_pay_start_minutes,
        custom_pay_end_minutes=custom_pay_end_minutes,
    )
    return recompute(record, hourly, policy, calculator=calculator)
