from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_datetime
from ..common.responses import json_body, ok
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.record_service
    store = container.record_store

    def _required_datetime(data: dict, key: str):
        value = data.get(key)
        if not value:
            raise ValidationError(f"Missing {key}")
        return parse_iso_datetime(value)

    @app.route("/clock/in", methods=["POST"], endpoint="clock_in")
    def clock_in():
        started = service.clock_in()
        return ok({"clocked_in_at": started.isoformat(timespec="seconds")})

    @app.route("/clock/out", methods=["POST"], endpoint="clock_out")
    def clock_out():
        record = service.clock_out()
        return ok({"record": service.to_ui(record)}, 201, persisted=store.persisted)

    @app.route("/clock", methods=["GET"], endpoint="clock_state")
    def clock_state():
        since = service.open_since
        return ok({"clocked_in": since is not None, "since": since.isoformat(timespec="seconds") if since else None})

    @app.route("/records", methods=["GET"], endpoint="records_list")
    def records_list():
        limit = request.args.get("limit", type=int)
        return ok({"records": service.history_ui(limit=limit)})

    @app.route("/records/<record_id>", methods=["PUT"], endpoint="records_edit")
    def records_edit(record_id: str):
        data = json_body()
        record = service.edit_record(
            record_id,
            start_time=_required_datetime(data, "start_time"),
            end_time=_required_datetime(data, "end_time"),
            hourly=data.get("hourly"),
            description=data.get("description"),
            uses_custom_pay_window=data.get("uses_custom_pay_window"),
            custom_pay_start_minutes=data.get("custom_pay_start_minutes"),
            custom_pay_end_minutes=data.get("custom_pay_end_minutes"),
        )
        return ok({"record": service.to_ui(record)}, persisted=store.persisted)

    @app.route("/records", methods=["DELETE"], endpoint="records_delete")
    def records_delete():
        indices = json_body().get("indices")
        if not isinstance(indices, list) or not all(isinstance(i, int) and not isinstance(i, bool) for i in indices):
            raise ValidationError("indices must be a list of integers")
        removed = service.delete_records(indices)
        return ok({"removed": [r.record_id for r in removed]}, persisted=store.persisted)

    @app.route("/summary", methods=["GET"], endpoint="summary")
    def summary():
        offset = request.args.get("offset", default=0, type=int)
        s = container.summary_service.for_offset(offset)
        return ok(
            {
                "label": s.label,
                "record_count": s.record_count,
                "total_seconds": s.total_seconds,
                "hours_and_minutes": s.hours_and_minutes,
                "total_half_hours": s.total_half_hours,
                "total_salary": s.total_salary,
            }
        )
