from datetime import date, datetime

import pytest

from src.paycheck_pal.paycheck_pal.core.exceptions import InvalidIntervalError, ValidationError
from src.paycheck_pal.paycheck_pal.payroll.calculator.standard_calculator import PayWindowCalculator
from src.paycheck_pal.paycheck_pal.payroll.pay_window import PayWindowPolicy
from src.paycheck_pal.paycheck_pal.payroll.recompute import build_record, recompute
from src.paycheck_pal.paycheck_pal.records.model import WorkRecord


def test_full_day_without_window(disabled_window):
    record = build_record(
        start_time=datetime(2025, 3, 3, 9, 0),
        end_time=datetime(2025, 3, 3, 17, 30),
        hourly=200,
        policy=disabled_window,
    )

    assert record.total_seconds == 30600
    assert record.hours_and_minutes_display == "8 hr 30 min"
    assert record.half_hour_decimal == 8.5
    assert record.salary == 1700
    assert record.work_date == date(2025, 3, 3)


def test_office_window_clips_early_and_late_minutes(office_window):
    record = build_record(
        start_time=datetime(2025, 3, 3, 8, 50),
        end_time=datetime(2025, 3, 3, 18, 10),
        hourly=150,
        policy=office_window,
    )

    assert record.total_seconds == 9 * 3600
    assert record.half_hour_decimal == 9.0
    assert record.salary == 1350


def test_custom_window_overrides_disabled_global_policy(disabled_window):
    record = build_record(
        start_time=datetime(2025, 3, 3, 6, 0),
        end_time=datetime(2025, 3, 3, 20, 0),
        hourly=100,
        policy=disabled_window,
        uses_custom_pay_window=True,
        custom_pay_start_minutes=0,
        custom_pay_end_minutes=23 * 60 + 59,
    )

    assert record.total_seconds == 14 * 3600
    assert record.salary == 1400


def test_custom_window_overrides_enabled_global_policy(office_window):
    record = build_record(
        start_time=datetime(2025, 3, 3, 20, 0),
        end_time=datetime(2025, 3, 4, 2, 0),
        hourly=100,
        policy=office_window,
        uses_custom_pay_window=True,
        custom_pay_start_minutes=22 * 60,
        custom_pay_end_minutes=6 * 60,
    )

    assert record.total_seconds == 4 * 3600
    assert record.work_date == date(2025, 3, 3)


def test_custom_minutes_are_ignored_when_flag_is_off(office_window):
    record = build_record(
        start_time=datetime(2025, 3, 3, 6, 0),
        end_time=datetime(2025, 3, 3, 10, 0),
        hourly=100,
        policy=office_window,
        uses_custom_pay_window=False,
        custom_pay_start_minutes=0,
        custom_pay_end_minutes=23 * 60 + 59,
    )

    assert record.total_seconds == 3600


def test_recompute_keeps_non_derived_fields(office_window):
    original = WorkRecord(
        record_id="r-1",
        start_time=datetime(2025, 3, 3, 9, 0),
        end_time=datetime(2025, 3, 3, 12, 0),
        hourly=120,
        salary=360,
        modified_hourly=True,
        description="inventory",
        custom_pay_start_minutes=60,
        custom_pay_end_minutes=120,
    )

    updated = recompute(original, 200, office_window)

    assert updated is not original
    assert updated.record_id == "r-1"
    assert updated.modified_hourly is True
    assert updated.description == "inventory"
    assert updated.work_date == original.work_date
    assert updated.uses_custom_pay_window is False
    assert (updated.custom_pay_start_minutes, updated.custom_pay_end_minutes) == (60, 120)
    assert (updated.start_time, updated.end_time) == (original.start_time, original.end_time)
    assert updated.hourly == 200
    assert updated.salary == 600
    # the input value is untouched
    assert original.salary == 360


def test_effective_policy_prefers_record_window(office_window):
    record = WorkRecord(
        record_id="r-2",
        start_time=datetime(2025, 3, 3, 9, 0),
        end_time=datetime(2025, 3, 3, 12, 0),
        uses_custom_pay_window=True,
        custom_pay_start_minutes=600,
        custom_pay_end_minutes=660,
    )

    effective = PayWindowCalculator().effective_policy(record, PayWindowPolicy(enabled=False))

    assert effective == PayWindowPolicy(enabled=True, start_minutes=600, end_minutes=660)
    assert PayWindowCalculator().paid_seconds(record, office_window) == 3600


def test_record_requires_end_after_start(disabled_window):
    with pytest.raises(InvalidIntervalError):
        build_record(
            start_time=datetime(2025, 3, 3, 9, 0),
            end_time=datetime(2025, 3, 3, 9, 0),
            hourly=100,
            policy=disabled_window,
        )


def test_custom_window_needs_minutes(disabled_window):
    with pytest.raises(ValidationError):
        build_record(
            start_time=datetime(2025, 3, 3, 9, 0),
            end_time=datetime(2025, 3, 3, 10, 0),
            hourly=100,
            policy=disabled_window,
            uses_custom_pay_window=True,
        )


def test_negative_wage_is_rejected(disabled_window):
    with pytest.raises(ValidationError):
        build_record(
            start_time=datetime(2025, 3, 3, 9, 0),
            end_time=datetime(2025, 3, 3, 10, 0),
            hourly=-5,
            policy=disabled_window,
        )
