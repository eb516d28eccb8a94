from __future__ import annotations

from typing import Protocol

from .model import PaySettings


class SettingsRepository(Protocol):
    def load(self) -> PaySettings:
        raise NotImplementedError

    def save(self, settings: PaySettings) -> None:
        raise NotImplementedError
