from __future__ import annotations

from typing import Optional, Sequence

from src.paycheck_pal.paycheck_pal.records.model import WorkRecord
from src.paycheck_pal.paycheck_pal.settings.model import PaySettings


class InMemoryRecords:
    def __init__(self, records: Optional[Sequence[WorkRecord]] = None, *, fail: bool = False):
        self.saved: list[WorkRecord] = list(records or [])
        self.save_calls = 0
        self.fail = fail

    def load_all(self) -> list[WorkRecord]:
        return list(self.saved)

    def save_all(self, records: Sequence[WorkRecord]) -> None:
        self.save_calls += 1
        if self.fail:
            raise OSError("disk full")
        self.saved = list(records)


class InMemorySettings:
    def __init__(self, settings: Optional[PaySettings] = None, *, fail: bool = False):
        self.settings = settings or PaySettings()
        self.save_calls = 0
        self.fail = fail

    def load(self) -> PaySettings:
        return self.settings

    def save(self, settings: PaySettings) -> None:
        self.save_calls += 1
        if self.fail:
            raise OSError("read-only filesystem")
        self.settings = settings
