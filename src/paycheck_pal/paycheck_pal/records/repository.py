from __future__ import annotations

from typing import Protocol, Sequence

from .model import WorkRecord


class RecordRepository(Protocol):
    def load_all(self) -> list[WorkRecord]:
        """Full ordered collection (most recent first); empty when nothing is stored."""

        raise NotImplementedError

    def save_all(self, records: Sequence[WorkRecord]) -> None:
        """Replace the stored collection atomically. May raise OSError."""

        raise NotImplementedError
