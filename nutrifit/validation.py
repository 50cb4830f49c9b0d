"""Validation decorators.

Run a schema over the request body, path params or query string and put the
sanitized value on ``flask.g`` (``validated_body``, ``validated_params``,
``validated_query``). Failures raise ``ValidationError``; the registered
handler turns that into a 400 without exposing schema internals.
"""
from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as SchemaError

from .errors import ValidationError
from .schemas import card_id_schema, card_type_schema


def describe_errors(exc: SchemaError, label: str | None = None) -> list[str]:
    """One readable line per violated field (no input echo, no docs URLs)."""
    out: list[str] = []
    for err in exc.errors(include_url=False, include_input=False, include_context=False):
        loc = ".".join(str(p) for p in err["loc"]) or label or "value"
        if err["type"] == "missing":
            out.append(f'"{loc}" is required')
            continue
        msg = err["msg"]
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        out.append(f'"{loc}" {msg[:1].lower()}{msg[1:]}')
    return out


def _raw_body() -> Any:
    if request.is_json:
        data = request.get_json(silent=True)
        return {} if data is None else data
    return request.form.to_dict()


def validate_body(schema: type[BaseModel], *, html_response: bool = False):
    def decorator(fn: Callable[..., Any]):
        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any):
            try:
                g.validated_body = schema.model_validate(_raw_body())
            except SchemaError as exc:
                raise ValidationError(describe_errors(exc), "html" if html_response else "json") from None
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def validate_params(
    type_schema: TypeAdapter[Any] = card_type_schema,
    id_schema: TypeAdapter[Any] = card_id_schema,
):
    """Validate ``card_type``/``card_id`` path params and pass the clean values on."""

    def decorator(fn: Callable[..., Any]):
        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any):
            errors: list[str] = []
            clean: dict[str, Any] = {}
            for arg, label, adapter in (
                ("card_type", "type", type_schema),
                ("card_id", "id", id_schema),
            ):
                try:
                    clean[arg] = adapter.validate_python(kwargs.get(arg))
                except SchemaError as exc:
                    errors.extend(describe_errors(exc, label))
            if errors:
                raise ValidationError(errors, "text")
            g.validated_params = {"type": clean["card_type"], "id": clean["card_id"]}
            kwargs.update(clean)
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def validate_query(schema: type[BaseModel]):
    def decorator(fn: Callable[..., Any]):
        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any):
            try:
                g.validated_query = schema.model_validate(request.args.to_dict())
            except SchemaError as exc:
                raise ValidationError(describe_errors(exc)) from None
            return fn(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["describe_errors", "validate_body", "validate_params", "validate_query"]
