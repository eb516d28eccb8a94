from __future__ import annotations

from ...records.model import WorkRecord
from ..pay_window import PayWindowPolicy, paid_seconds_for_policy
from .base import PayrollCalculator


class PayWindowCalculator(PayrollCalculator):
    """Standard rule: raw interval intersected with the effective pay window.

    A record carrying its own window always uses it (treated as enabled),
    whatever the global policy says.
    """

    def effective_policy(self, record: WorkRecord, policy: PayWindowPolicy) -> PayWindowPolicy:
        if record.uses_custom_pay_window:
            return PayWindowPolicy(
                enabled=True,
                start_minutes=record.custom_pay_start_minutes,
                end_minutes=record.custom_pay_end_minutes,
            )
        return policy

    def paid_seconds(self, record: WorkRecord, policy: PayWindowPolicy) -> int:
        effective = self.effective_policy(record, policy)
        return paid_seconds_for_policy(record.start_time, record.end_time, effective)
