from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import hhmm_to_minutes, minutes_to_hhmm
from ..common.responses import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    settings = container.settings_service

    def _settings_payload() -> dict:
        current = settings.current()
        window = current.pay_window
        return {
            "wage_per_hour": current.wage_per_hour,
            "needs_setup": settings.needs_setup(),
            "pay_window": {
                "enabled": window.enabled,
                "start_minutes": window.start_minutes,
                "end_minutes": window.end_minutes,
                "start": minutes_to_hhmm(window.start_minutes),
                "end": minutes_to_hhmm(window.end_minutes),
            },
        }

    def _minutes(data: dict, key: str):
        # Accept either raw minutes ("start_minutes") or "HH:MM" ("start").
        if data.get(f"{key}_minutes") is not None:
            return data.get(f"{key}_minutes")
        if data.get(key) is not None:
            return hhmm_to_minutes(data[key])
        return None

    @app.route("/settings", methods=["GET"], endpoint="settings_get")
    def settings_get():
        return ok(_settings_payload())

    @app.route("/settings/wage", methods=["PUT"], endpoint="settings_wage")
    def settings_wage():
        settings.update_wage(json_body().get("wage"))
        return ok(_settings_payload())

    @app.route("/settings/pay-window", methods=["PUT"], endpoint="settings_pay_window")
    def settings_pay_window():
        data = json_body()
        settings.update_pay_window(
            enabled=data.get("enabled", False),
            start_minutes=_minutes(data, "start"),
            end_minutes=_minutes(data, "end"),
        )
        return ok(_settings_payload())

    @app.route("/settings/wage/apply", methods=["POST"], endpoint="settings_wage_apply")
    def settings_wage_apply():
        data = json_body()
        count = container.record_service.apply_wage(
            wage=data.get("wage"),
            scope=data.get("scope", "month"),
            apply_to_modified_hourly=data.get("apply_to_modified_hourly", False),
        )
        payload = _settings_payload()
        payload["updated"] = count
        return ok(payload, persisted=container.record_store.persisted)
