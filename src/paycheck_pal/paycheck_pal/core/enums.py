from __future__ import annotations

from enum import Enum


class ApplyScope(str, Enum):
    """Which records a wage-settings confirmation is applied to."""

    MONTH = "month"
    ALL = "all"
