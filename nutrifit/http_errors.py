"""Shared response builders for the JSON and form surfaces.

JSON bodies use the ``{error, message}`` envelope; form posts get a minimal
static HTML page. Nothing here echoes request input or internal details.
"""
from __future__ import annotations

import math
from datetime import UTC, datetime

from flask import g, jsonify
from werkzeug.wrappers.response import Response

INVALID_INPUT_HTML = (
    '<!DOCTYPE html><html><head><meta charset="utf-8"><title>Invalid input</title></head>'
    "<body><h1>Invalid input</h1><p>Please check your data and try again.</p>"
    '<a href="javascript:history.back()">Go back</a></body></html>'
)


def json_error(http_status: int, error: str, message: str | None = None, **extra: object) -> Response:
    payload: dict[str, object] = {"error": error}
    if message is not None:
        payload["message"] = message
    for k, v in extra.items():
        if v is not None:
            payload[k] = v
    resp = jsonify(payload)
    resp.status_code = http_status
    rid = getattr(g, "request_id", None)
    if rid and "X-Request-Id" not in resp.headers:
        resp.headers["X-Request-Id"] = rid
    return resp


def api_error(status: int, error: str, message: str | None = None) -> Response:
    # /api/* routes add a status marker next to the error text
    return json_error(status, error, message, status="error")


def utc_timestamp() -> str:
    # ISO-8601 UTC with millisecond precision and a Z suffix
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def api_success(**fields: object) -> Response:
    return jsonify({"status": "success", **fields, "timestamp": utc_timestamp()})


def bad_request(message: str) -> Response:
    return json_error(400, "Validation failed", message)


def bad_request_html() -> Response:
    return Response(INVALID_INPUT_HTML, status=400, mimetype="text/html")


def bad_request_text(message: str) -> Response:
    return Response(message or "Invalid parameters", status=400, mimetype="text/plain")


def retry_after_seconds(window_ms: int) -> int:
    return int(math.ceil(window_ms / 1000))


def too_many_requests(retry_after: int, message: str = "Please slow down and try again later.") -> Response:
    resp = json_error(429, "Too many requests", message, retryAfterSeconds=int(retry_after))
    resp.headers["Retry-After"] = str(int(retry_after))
    return resp


def internal_server_error(incident_id: str | None = None) -> Response:
    return json_error(
        500,
        "Internal server error",
        "Something went wrong. Please try again later.",
        incidentId=incident_id,
    )


__all__ = [
    "json_error",
    "api_error",
    "api_success",
    "utc_timestamp",
    "bad_request",
    "bad_request_html",
    "bad_request_text",
    "retry_after_seconds",
    "too_many_requests",
    "internal_server_error",
]
