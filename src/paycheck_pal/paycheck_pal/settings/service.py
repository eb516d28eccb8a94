from __future__ import annotations

import dataclasses
import logging

from ..common.validators import require_bool, require_minute_of_day, require_non_negative_number
from ..payroll.pay_window import PayWindowPolicy
from .model import PaySettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Reads and updates the wage and global pay-window policy.

    Writes go straight to the repository; an OSError is logged and the new
    value is still served from memory for the rest of the process.
    """

    def __init__(self, settings: SettingsRepository):
        self._repo = settings
        self._current = settings.load()

    def current(self) -> PaySettings:
        return self._current

    def needs_setup(self) -> bool:
        return not self._current.wage_is_set

    def update_wage(self, wage_per_hour) -> PaySettings:
        wage = require_non_negative_number(wage_per_hour, "wage_per_hour")
        return self._store(dataclasses.replace(self._current, wage_per_hour=wage))

    def update_pay_window(self, *, enabled: bool, start_minutes: int, end_minutes: int) -> PaySettings:
        policy = PayWindowPolicy(
            enabled=require_bool(enabled, "enabled"),
            start_minutes=require_minute_of_day(start_minutes, "start_minutes"),
            end_minutes=require_minute_of_day(end_minutes, "end_minutes"),
        )
        return self._store(dataclasses.replace(self._current, pay_window=policy))

    def _store(self, settings: PaySettings) -> PaySettings:
        self._current = settings
        try:
            self._repo.save(settings)
        except OSError as e:
            logger.warning("Failed to save pay settings: %s", e)
        return settings
