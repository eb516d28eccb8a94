from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence

from ..core.constants import STORAGE_FORMAT_VERSION
from ..core.exceptions import DomainError
from ..storage.json_base import read_json, write_json
from .model import WorkRecord
from .repository import RecordRepository

logger = logging.getLogger(__name__)


def record_to_row(r: WorkRecord) -> dict[str, Any]:
    return {
        "id": r.record_id,
        "date": r.work_date.isoformat(),
        "start_time": r.start_time.isoformat(),
        "end_time": r.end_time.isoformat(),
        "total_seconds": r.total_seconds,
        "hours_and_minutes_display": r.hours_and_minutes_display,
        "half_hour_decimal": r.half_hour_decimal,
        "hourly": r.hourly,
        "salary": r.salary,
        "modified_hourly": r.modified_hourly,
        "description": r.description,
        "uses_custom_pay_window": r.uses_custom_pay_window,
        "custom_pay_start_minutes": r.custom_pay_start_minutes,
        "custom_pay_end_minutes": r.custom_pay_end_minutes,
    }


def row_to_record(row: dict[str, Any]) -> WorkRecord:
    # "date" is written for readers of the file but re-derived from start_time here.
    return WorkRecord(
        record_id=str(row["id"]),
        start_time=datetime.fromisoformat(row["start_time"]),
        end_time=datetime.fromisoformat(row["end_time"]),
        total_seconds=int(row["total_seconds"]),
        hours_and_minutes_display=str(row["hours_and_minutes_display"]),
        half_hour_decimal=float(row["half_hour_decimal"]),
        hourly=float(row["hourly"]),
        salary=float(row["salary"]),
        modified_hourly=bool(row.get("modified_hourly", False)),
        description=str(row.get("description") or ""),
        uses_custom_pay_window=bool(row.get("uses_custom_pay_window", False)),
        custom_pay_start_minutes=row.get("custom_pay_start_minutes"),
        custom_pay_end_minutes=row.get("custom_pay_end_minutes"),
    )


class JsonRecordRepository(RecordRepository):
    """Whole-file JSON persistence: loaded in full, rewritten in full."""

    def __init__(self, path: Path):
        self._path = Path(path)

    def load_all(self) -> list[WorkRecord]:
        try:
            payload = read_json(self._path)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, starting with no records: %s", self._path, e)
            return []

        try:
            rows = payload["records"]
            return [row_to_record(row) for row in rows]
        except (KeyError, TypeError, ValueError, DomainError) as e:
            logger.warning("Stored records in %s are corrupt, starting with no records: %s", self._path, e)
            return []

    def save_all(self, records: Sequence[WorkRecord]) -> None:
        write_json(
            self._path,
            {"version": STORAGE_FORMAT_VERSION, "records": [record_to_row(r) for r in records]},
        )
