from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import now_local, shift_month
from ..core.constants import SUMMARY_MONTH_OFFSET_LIMIT
from ..core.exceptions import ValidationError
from ..records.store import RecordStore
from .time_math import format_duration


@dataclass(frozen=True)
class MonthlySummary:
    year: int
    month: int
    record_count: int
    total_seconds: int
    hours_and_minutes: str
    total_half_hours: float
    total_salary: float

    @property
    def label(self) -> str:
        return f"{self.year:04d}/{self.month:02d}"


class PayrollSummaryService:
    def __init__(self, store: RecordStore):
        self._store = store

    def monthly_summary(self, year: int, month: int) -> MonthlySummary:
        if not 1 <= int(month) <= 12:
            raise ValidationError("month must be between 1 and 12")

        rows = self._store.records_for_month(year, month)
        total_seconds = sum(r.total_seconds for r in rows)
        return MonthlySummary(
            year=int(year),
            month=int(month),
            record_count=len(rows),
            total_seconds=total_seconds,
            hours_and_minutes=format_duration(total_seconds),
            total_half_hours=sum(r.half_hour_decimal for r in rows),
            total_salary=sum(r.salary for r in rows),
        )

    def for_offset(self, offset: int = 0, *, today: Optional[date] = None) -> MonthlySummary:
        """Summary for the month `offset` months from the current one (-12..12)."""
        offset = int(offset)
        if abs(offset) > SUMMARY_MONTH_OFFSET_LIMIT:
            raise ValidationError(f"offset must be within +/-{SUMMARY_MONTH_OFFSET_LIMIT} months")
        year, month = shift_month(today or now_local().date(), offset)
        return self.monthly_summary(year, month)
