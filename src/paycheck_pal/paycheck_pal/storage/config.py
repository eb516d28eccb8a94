from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.constants import DEFAULT_RECORDS_FILENAME, DEFAULT_SETTINGS_FILENAME


@dataclass(frozen=True)
class StorageConfig:
    data_dir: Path
    records_filename: str = DEFAULT_RECORDS_FILENAME
    settings_filename: str = DEFAULT_SETTINGS_FILENAME

    @property
    def records_path(self) -> Path:
        return Path(self.data_dir) / self.records_filename

    @property
    def settings_path(self) -> Path:
        return Path(self.data_dir) / self.settings_filename

    @classmethod
    def from_mapping(cls, values: dict) -> "StorageConfig":
        return cls(
            data_dir=Path(values["data_dir"]),
            records_filename=str(values.get("records_filename") or DEFAULT_RECORDS_FILENAME),
            settings_filename=str(values.get("settings_filename") or DEFAULT_SETTINGS_FILENAME),
        )
