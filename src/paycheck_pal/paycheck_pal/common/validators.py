from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import ValidationError
from .datetime_utils import is_minute_of_day


def require_minute_of_day(value: Any, field_name: str) -> int:
    if not is_minute_of_day(value):
        raise ValidationError(f"{field_name} must be an integer minute of the day (0-1439)")
    return int(value)


def require_non_negative_number(value: Any, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} must be a number") from e
    if math.isnan(number) or math.isinf(number) or number < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    return number


def require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(f"{field_name} must be a non-negative integer")
    return value


def require_bool(value: Any, field_name: str) -> bool:
    # JSON "false" is a truthy string; only real booleans are accepted.
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value
