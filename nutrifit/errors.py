"""Domain error system + handler registration.

Every failure leaves the app through one of these handlers:
 - ValidationError  -> 400 (JSON, static HTML or plain text)
 - RateLimitError   -> 429 with Retry-After
 - unknown routes   -> redirect to the sign-in page
 - anything else    -> 500 with a generic body and a logged incident id
"""
from __future__ import annotations

import uuid
from typing import Any, Literal

from flask import Flask, redirect, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound
from werkzeug.wrappers.response import Response

from .http_errors import (
    bad_request,
    bad_request_html,
    bad_request_text,
    internal_server_error,
    json_error,
    too_many_requests,
)
from .rate_limiter import RateLimitError

ErrorFormat = Literal["json", "html", "text"]

AI_UNAVAILABLE = "AI service is temporarily unavailable."


class DomainError(Exception):
    def __init__(self, status: int, code: str, detail: str | None = None, **extra: Any):
        self.status = status
        self.code = code
        self.detail = detail or code
        self.extra = extra
        super().__init__(self.detail)


class ValidationError(DomainError):
    def __init__(self, errors: list[str], fmt: ErrorFormat = "json"):
        super().__init__(400, "validation_error", "; ".join(errors))
        self.errors = errors
        self.fmt = fmt


class StoreError(Exception):
    """Card store is not configured or a query against it failed."""


class AssistantServiceError(Exception):
    """Completion API failed for a reason other than a missing/rejected key."""

    def __init__(self, message: str = AI_UNAVAILABLE):
        super().__init__(message)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _h_validation(err: ValidationError) -> Response:
        app.logger.info("Rejected input path=%s errors=%d", request.path, len(err.errors))
        if err.fmt == "html":
            return bad_request_html()
        if err.fmt == "text":
            return bad_request_text(err.detail)
        return bad_request(err.detail)

    @app.errorhandler(RateLimitError)
    def _h_rate_limit(err: RateLimitError) -> Response:
        return too_many_requests(err.retry_after)

    @app.errorhandler(DomainError)
    def _h_domain(err: DomainError) -> Response:
        return json_error(err.status, err.code, err.detail)

    # Unknown paths (and known paths with the wrong method) send users back to sign-in
    @app.errorhandler(NotFound)
    def _h404(_: Exception) -> Response:
        return redirect("/")

    @app.errorhandler(MethodNotAllowed)
    def _h405(_: Exception) -> Response:
        app.logger.warning("Mapping 405 to sign-in redirect path=%s method=%s", request.path, request.method)
        return redirect("/")

    @app.errorhandler(HTTPException)
    def _h_http(ex: HTTPException) -> Response:
        status = ex.code or 500
        if status >= 500:
            return internal_server_error()
        return json_error(status, ex.name, ex.description)

    @app.errorhandler(Exception)
    def _h500(ex: Exception) -> Response:
        incident_id = str(uuid.uuid4())
        app.logger.exception("Unhandled exception incident_id=%s path=%s", incident_id, request.path)
        return internal_server_error(incident_id=incident_id)


__all__ = [
    "AI_UNAVAILABLE",
    "DomainError",
    "ValidationError",
    "StoreError",
    "AssistantServiceError",
    "register_error_handlers",
]
