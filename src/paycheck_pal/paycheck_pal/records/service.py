from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from typing import Iterable, Optional

from ..common.datetime_utils import now_local, wall_clock
from ..common.validators import require_bool, require_non_negative_number
from ..core.enums import ApplyScope
from ..core.exceptions import ClockStateError, InvalidIntervalError, ValidationError
from ..payroll.recompute import build_record, recompute
from ..settings.service import SettingsService
from .model import WorkRecord
from .store import RecordStore

logger = logging.getLogger(__name__)


class RecordService:
    """Clock punches, edits, deletions and wage applies on top of the record store.

    This is the only layer that reads the current wage and pay window; the
    store and the recompute engine always get them as explicit arguments.
    """

    def __init__(self, store: RecordStore, settings: SettingsService):
        self._store = store
        self._settings = settings
        self._open_since: Optional[datetime] = None

    @property
    def open_since(self) -> Optional[datetime]:
        return self._open_since

    def clock_in(self, *, now: datetime | None = None) -> datetime:
        if self._open_since is not None:
            raise ClockStateError("Still clocked in; clock out before clocking in again")
        self._open_since = wall_clock(now or now_local())
        return self._open_since

    def clock_out(self, *, now: datetime | None = None) -> WorkRecord:
        start = self._open_since
        if start is None:
            raise ClockStateError("Not clocked in; clock in before clocking out")

        end = wall_clock(now or now_local())
        # The open session is consumed whether or not it produces a record.
        self._open_since = None
        if end <= start:
            logger.warning("Discarding clock-out at %s: not after clock-in at %s", end, start)
            raise InvalidIntervalError("Clock-out must be after clock-in")

        settings = self._settings.current()
        record = build_record(
            start_time=start,
            end_time=end,
            hourly=settings.wage_per_hour,
            policy=settings.pay_window,
        )
        return self._store.add(record)

    def add_record(
        self,
        *,
        start_time: datetime,
        end_time: datetime,
        description: str = "",
    ) -> WorkRecord:
        settings = self._settings.current()
        record = build_record(
            start_time=start_time,
            end_time=end_time,
            hourly=settings.wage_per_hour,
            policy=settings.pay_window,
            description=description,
        )
        return self._store.add(record)

    def edit_record(
        self,
        record_id: str,
        *,
        start_time: datetime,
        end_time: datetime,
        hourly: float | None = None,
        description: str | None = None,
        uses_custom_pay_window: bool | None = None,
        custom_pay_start_minutes: int | None = None,
        custom_pay_end_minutes: int | None = None,
    ) -> WorkRecord:
        """Apply an edit confirmation and recompute the record.

        Entering a wage different from the stored one marks the record as
        manually modified, which shields it from later bulk wage applies.
        """
        existing = self._store.get(record_id)

        applied_hourly = existing.hourly
        modified = existing.modified_hourly
        if hourly is not None:
            new_hourly = require_non_negative_number(hourly, "hourly")
            if new_hourly != existing.hourly:
                applied_hourly = new_hourly
                modified = True

        custom = existing.uses_custom_pay_window
        if uses_custom_pay_window is not None:
            custom = require_bool(uses_custom_pay_window, "uses_custom_pay_window")
        custom_start = existing.custom_pay_start_minutes if custom_pay_start_minutes is None else custom_pay_start_minutes
        custom_end = existing.custom_pay_end_minutes if custom_pay_end_minutes is None else custom_pay_end_minutes

        edited = dataclasses.replace(
            existing,
            start_time=start_time,
            end_time=end_time,
            modified_hourly=modified,
            description=existing.description if description is None else description,
            uses_custom_pay_window=custom,
            custom_pay_start_minutes=custom_start,
            custom_pay_end_minutes=custom_end,
        )
        updated = recompute(edited, applied_hourly, self._settings.current().pay_window)
        return self._store.replace(updated)

    def delete_records(self, indices: Iterable[int]) -> list[WorkRecord]:
        return self._store.remove(indices)

    def apply_wage(
        self,
        *,
        wage: float,
        scope: ApplyScope | str,
        apply_to_modified_hourly: bool = False,
        today: date | None = None,
    ) -> int:
        """Save `wage` as the current rate and recompute the chosen records with it."""
        try:
            scope = ApplyScope(scope)
        except ValueError as e:
            raise ValidationError(f"Unknown apply scope: {scope!r}") from e

        apply_to_modified_hourly = require_bool(apply_to_modified_hourly, "apply_to_modified_hourly")
        settings = self._settings.update_wage(wage)
        if scope is ApplyScope.ALL:
            return self._store.apply_to_all(settings.wage_per_hour, apply_to_modified_hourly, settings.pay_window)

        today = today or now_local().date()
        return self._store.apply_to_month(
            today.year,
            today.month,
            settings.wage_per_hour,
            apply_to_modified_hourly,
            settings.pay_window,
        )

    def history_ui(self, *, limit: int | None = None) -> list[dict]:
        rows = self._store.records
        if limit is not None:
            rows = rows[: int(limit)]
        return [self.to_ui(r) for r in rows]

    def to_ui(self, r: WorkRecord) -> dict:
        return {
            "id": r.record_id,
            "date": r.work_date.strftime("%Y-%m-%d"),
            "start_time": r.start_time.isoformat(timespec="seconds"),
            "end_time": r.end_time.isoformat(timespec="seconds"),
            "total_seconds": r.total_seconds,
            "hours_and_minutes": r.hours_and_minutes_display,
            "half_hour_decimal": r.half_hour_decimal,
            "hourly": r.hourly,
            "salary": r.salary,
            "modified_hourly": r.modified_hourly,
            "description": r.description,
            "uses_custom_pay_window": r.uses_custom_pay_window,
            "custom_pay_start_minutes": r.custom_pay_start_minutes,
            "custom_pay_end_minutes": r.custom_pay_end_minutes,
        }
