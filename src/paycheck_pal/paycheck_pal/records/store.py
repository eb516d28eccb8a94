from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, Optional, Sequence

from ..common.validators import require_non_negative_number
from ..core.exceptions import NotFoundError, PersistenceError
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.pay_window import PayWindowPolicy
from ..payroll.recompute import recompute
from .model import WorkRecord
from .repository import RecordRepository

logger = logging.getLogger(__name__)


def _window_label(policy: PayWindowPolicy) -> str:
    return policy.label() if policy.enabled else "off"


class RecordStore:
    """In-memory ordered collection of work records (most recent first).

    The in-memory list is the source of truth for the running process. Every
    mutation is written through to the repository before returning; a failed
    write is logged and kept on `last_persist_error` instead of being raised.
    Mutations are serialized behind one lock since the bulk applies
    read-then-write every record.
    """

    def __init__(
        self,
        repository: RecordRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._repository = repository
        self._calculator = calculator
        self._lock = threading.RLock()
        self._records: list[WorkRecord] = list(repository.load_all())
        self.last_persist_error: Optional[PersistenceError] = None

    @property
    def records(self) -> tuple[WorkRecord, ...]:
        with self._lock:
            return tuple(self._records)

    @property
    def persisted(self) -> bool:
        return self.last_persist_error is None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def get(self, record_id: str) -> WorkRecord:
        with self._lock:
            return self._records[self._index_of(record_id)]

    def records_for_month(self, year: int, month: int) -> list[WorkRecord]:
        with self._lock:
            return [r for r in self._records if r.in_month(year, month)]

    def add(self, record: WorkRecord) -> WorkRecord:
        # WorkRecord cannot exist with end <= start, so the interval is already valid here.
        with self._lock:
            self._records.insert(0, record)
            self._persist()
            return record

    def remove(self, indices: Iterable[int]) -> list[WorkRecord]:
        with self._lock:
            positions = sorted(set(int(i) for i in indices))
            for i in positions:
                if i < 0 or i >= len(self._records):
                    raise NotFoundError(f"No record at position {i}")

            removed = [self._records[i] for i in positions]
            for i in reversed(positions):
                del self._records[i]
            self._persist()
            return removed

    def replace(self, record: WorkRecord) -> WorkRecord:
        with self._lock:
            idx = self._index_of(record.record_id)
            self._records[idx] = record
            self._persist()
            return record

    def apply_to_all(
        self,
        hourly: float,
        apply_to_modified_hourly: bool,
        policy: PayWindowPolicy,
    ) -> int:
        """Recompute every unprotected record with `hourly`/`policy`; returns how many changed."""
        with self._lock:
            hourly = require_non_negative_number(hourly, "hourly")
            count = self._apply(lambda r: True, hourly, apply_to_modified_hourly, policy)
            logger.info("Applied wage %.2f (window %s) to %d record(s)", hourly, _window_label(policy), count)
            return count

    def apply_to_month(
        self,
        year: int,
        month: int,
        hourly: float,
        apply_to_modified_hourly: bool,
        policy: PayWindowPolicy,
    ) -> int:
        """Like `apply_to_all`, limited to records whose `work_date` is in year/month."""
        with self._lock:
            hourly = require_non_negative_number(hourly, "hourly")
            count = self._apply(lambda r: r.in_month(year, month), hourly, apply_to_modified_hourly, policy)
            logger.info(
                "Applied wage %.2f (window %s) to %d record(s) in %04d/%02d",
                hourly,
                _window_label(policy),
                count,
                int(year),
                int(month),
            )
            return count

    def _apply(
        self,
        selector: Callable[[WorkRecord], bool],
        hourly: float,
        apply_to_modified_hourly: bool,
        policy: PayWindowPolicy,
    ) -> int:
        updated: list[WorkRecord] = []
        count = 0
        for r in self._records:
            if selector(r) and (apply_to_modified_hourly or not r.modified_hourly):
                updated.append(recompute(r, hourly, policy, calculator=self._calculator))
                count += 1
            else:
                updated.append(r)

        self._records = updated
        self._persist()
        return count

    def _index_of(self, record_id: str) -> int:
        for idx, r in enumerate(self._records):
            if r.record_id == record_id:
                return idx
        raise NotFoundError(f"Record {record_id} not found")

    def _persist(self) -> None:
        snapshot: Sequence[WorkRecord] = tuple(self._records)
        try:
            self._repository.save_all(snapshot)
        except OSError as e:
            self.last_persist_error = PersistenceError(str(e))
            logger.warning("Failed to save records, keeping in-memory state: %s", e)
        else:
            self.last_persist_error = None
