from __future__ import annotations

from dataclasses import dataclass

from .payroll.service import PayrollSummaryService
from .records.json_record_repository import JsonRecordRepository
from .records.service import RecordService
from .records.store import RecordStore
from .settings.json_settings_repository import JsonSettingsRepository
from .settings.service import SettingsService
from .storage.config import StorageConfig


@dataclass(frozen=True)
class Container:
    storage: StorageConfig

    records_repo: JsonRecordRepository
    settings_repo: JsonSettingsRepository
    record_store: RecordStore

    settings_service: SettingsService
    record_service: RecordService
    summary_service: PayrollSummaryService


def build_container(*, storage_config: dict) -> Container:
    storage = StorageConfig.from_mapping(storage_config)

    records_repo = JsonRecordRepository(storage.records_path)
    settings_repo = JsonSettingsRepository(storage.settings_path)
    record_store = RecordStore(records_repo)

    settings_service = SettingsService(settings_repo)
    record_service = RecordService(record_store, settings_service)
    summary_service = PayrollSummaryService(record_store)

    return Container(
        storage=storage,
        records_repo=records_repo,
        settings_repo=settings_repo,
        record_store=record_store,
        settings_service=settings_service,
        record_service=record_service,
        summary_service=summary_service,
    )
