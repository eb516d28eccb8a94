from __future__ import annotations

from datetime import datetime

import pytest

from src.paycheck_pal.paycheck_pal.payroll.pay_window import PayWindowPolicy


@pytest.fixture
def fixed_now():
    return datetime(2025, 3, 14, 9, 0, 0)


@pytest.fixture
def disabled_window():
    return PayWindowPolicy(enabled=False)


@pytest.fixture
def office_window():
    return PayWindowPolicy(enabled=True, start_minutes=9 * 60, end_minutes=18 * 60)
