"""Duration helpers shared by records, summaries and the recompute engine."""

from __future__ import annotations

import math

from ..common.validators import require_non_negative_int
from ..core.constants import HALF_HOUR_STEP, SECONDS_PER_HOUR, SECONDS_PER_MINUTE


def format_duration(total_seconds: int) -> str:
    """Render seconds as whole hours + remainder minutes (truncated, never rounded)."""
    total_seconds = require_non_negative_int(total_seconds, "total_seconds")
    hours = total_seconds // SECONDS_PER_HOUR
    minutes = (total_seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
    return f"{hours} hr {minutes} min"


def half_hour_floor(total_seconds: int) -> float:
    """Hours floored to the nearest 0.5.

    Anything under 30 minutes is 0.0. Payable hours are never rounded up.
    """
    total_seconds = require_non_negative_int(total_seconds, "total_seconds")
    hours = total_seconds / float(SECONDS_PER_HOUR)
    return math.floor(hours / HALF_HOUR_STEP) * HALF_HOUR_STEP
