from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..core.constants import DEFAULT_PAY_WINDOW_END_MINUTES, DEFAULT_PAY_WINDOW_START_MINUTES, DEFAULT_WAGE_PER_HOUR
from ..core.exceptions import DomainError
from ..payroll.pay_window import PayWindowPolicy
from ..storage.json_base import read_json, write_json
from .model import PaySettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class JsonSettingsRepository(SettingsRepository):
    def __init__(self, path: Path):
        self._path = Path(path)

    def load(self) -> PaySettings:
        try:
            payload = read_json(self._path)
        except FileNotFoundError:
            return PaySettings()
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, using default pay settings: %s", self._path, e)
            return PaySettings()

        try:
            return self._from_payload(payload)
        except (KeyError, TypeError, ValueError, DomainError) as e:
            logger.warning("Pay settings in %s are corrupt, using defaults: %s", self._path, e)
            return PaySettings()

    def save(self, settings: PaySettings) -> None:
        write_json(
            self._path,
            {
                "wage_per_hour": settings.wage_per_hour,
                "pay_window_enabled": settings.pay_window.enabled,
                "pay_window_start_minutes": settings.pay_window.start_minutes,
                "pay_window_end_minutes": settings.pay_window.end_minutes,
            },
        )

    def _from_payload(self, payload: dict[str, Any]) -> PaySettings:
        return PaySettings(
            wage_per_hour=float(payload.get("wage_per_hour", DEFAULT_WAGE_PER_HOUR)),
            pay_window=PayWindowPolicy(
                enabled=bool(payload.get("pay_window_enabled", False)),
                start_minutes=payload.get("pay_window_start_minutes", DEFAULT_PAY_WINDOW_START_MINUTES),
                end_minutes=payload.get("pay_window_end_minutes", DEFAULT_PAY_WINDOW_END_MINUTES),
            ),
        )
