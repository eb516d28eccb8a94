from __future__ import annotations

from abc import ABC, abstractmethod

from ...records.model import WorkRecord
from ..pay_window import PayWindowPolicy


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def paid_seconds(self, record: WorkRecord, policy: PayWindowPolicy) -> int:
        raise NotImplementedError
