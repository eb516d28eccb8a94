from __future__ import annotations

import logging

from flask import jsonify, request

from ..core.exceptions import ClockStateError, DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def ok(payload: dict, status: int = 200, *, persisted: bool | None = None):
    body = {"success": True, **payload}
    if persisted is not None:
        body["persisted"] = persisted
    return jsonify(body), status


def error_response(e: DomainError):
    if isinstance(e, NotFoundError):
        status = 404
    elif isinstance(e, ClockStateError):
        status = 409
    elif isinstance(e, ValidationError):
        status = 400
    else:
        logger.warning("Unhandled domain error: %s", e)
        status = 500
    return jsonify({"success": False, "error": type(e).__name__, "message": str(e)}), status
