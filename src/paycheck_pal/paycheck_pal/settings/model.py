from __future__ import annotations

from dataclasses import dataclass, field

from ..core.constants import DEFAULT_WAGE_PER_HOUR
from ..payroll.pay_window import PayWindowPolicy


@dataclass(frozen=True)
class PaySettings:
    """Process-wide pay configuration. A wage of 0 means "not set yet"."""

    wage_per_hour: float = DEFAULT_WAGE_PER_HOUR
    pay_window: PayWindowPolicy = field(default_factory=PayWindowPolicy)

    @property
    def wage_is_set(self) -> bool:
        return self.wage_per_hour != 0
