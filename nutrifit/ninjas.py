"""API Ninjas data gateway (nutrition, recipes, exercises).

Every lookup returns an envelope, ``{"success": True, "data": ...}`` or
``{"success": False, "error": "..."}``. Missing keys, HTTP error statuses,
transport errors and undecodable bodies are all reported through the
envelope; nothing raises past this module.
"""

from __future__ import annotations

import logging
from typing import Any, TypedDict

import httpx
from flask import current_app

from .clients import ClientState, Configured, Unconfigured
from .config import Config

log = logging.getLogger(__name__)

EXTENSION_KEY = "nutrifit.ninjas"
MAX_LIMIT = 100


class Envelope(TypedDict, total=False):
    success: bool
    data: Any
    error: str


def _ok(data: Any) -> Envelope:
    return {"success": True, "data": data}


def _fail(error: str) -> Envelope:
    return {"success": False, "error": error}


def _key_state(key: str | None, kind: str) -> ClientState:
    if not key:
        return Unconfigured(f"{kind.capitalize()} API key is not configured")
    return Configured(key)


class NinjasClient:
    def __init__(
        self,
        keys: dict[str, str | None],
        base_url: str = "https://api.api-ninjas.com/v1",
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._keys: dict[str, ClientState] = {
            kind: _key_state(keys.get(kind), kind) for kind in ("nutrition", "recipe", "exercise")
        }
        self._http = httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout, transport=transport)

    @classmethod
    def from_config(cls, cfg: Config, transport: httpx.BaseTransport | None = None) -> NinjasClient:
        keys = {kind: cfg.ninjas_key(kind) for kind in ("nutrition", "recipe", "exercise")}
        for kind, key in keys.items():
            if not key:
                log.warning("No API key for %s lookups; those endpoints will report an error", kind)
        return cls(keys, base_url=cfg.ninjas_base_url, timeout=cfg.ninjas_timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def _get(self, kind: str, path: str, params: dict[str, Any], default_error: str) -> Envelope:
        state = self._keys[kind]
        if isinstance(state, Unconfigured):
            return _fail(state.reason)
        try:
            resp = self._http.get(path, params=params, headers={"X-Api-Key": state.client})
        except httpx.HTTPError as exc:
            log.warning("API Ninjas %s transport error: %s", path, exc.__class__.__name__)
            return _fail(default_error)
        if resp.is_error:
            log.warning("API Ninjas %s returned HTTP %s", path, resp.status_code)
            return _fail(_upstream_error(resp) or default_error)
        try:
            return _ok(resp.json())
        except ValueError:
            log.warning("API Ninjas %s returned a non-JSON body", path)
            return _fail(default_error)

    def get_nutrition_info(self, query: str) -> Envelope:
        return self._get("nutrition", "/nutrition", {"query": query}, "Failed to fetch nutrition information")

    def get_nutrition_item(self, item: str, quantity: str | None = None) -> Envelope:
        return self._get(
            "nutrition",
            "/nutritionitem",
            {"query": item, "quantity": quantity or "100g"},
            "Failed to fetch nutrition item information",
        )

    def search_recipes(self, query: str | None) -> Envelope:
        if isinstance(self._keys["recipe"], Unconfigured):
            return _fail(self._keys["recipe"].reason)
        if not query:
            return _fail("Query parameter is required")
        # limit/offset are premium-only upstream; only the query is sent
        return self._get("recipe", "/recipe", {"query": query}, "Failed to fetch recipes")

    def get_exercises(
        self,
        name: str | None = None,
        type: str | None = None,
        muscle: str | None = None,
        difficulty: str | None = None,
        equipment: str | None = None,
    ) -> Envelope:
        filters = {
            "name": name,
            "type": type,
            "muscle": muscle,
            "difficulty": difficulty,
            "equipment": equipment,
        }
        params = {k: v for k, v in filters.items() if v}
        return self._get("exercise", "/exercises", params, "Failed to fetch exercises")

    def get_all_exercises_for_muscle(self, muscle: str | None, limit: int = 10, offset: int = 0) -> Envelope:
        if isinstance(self._keys["exercise"], Unconfigured):
            return _fail(self._keys["exercise"].reason)
        if not muscle:
            return _fail("Muscle parameter is required")
        params = {"muscle": muscle, "limit": min(limit, MAX_LIMIT), "offset": offset}
        return self._get("exercise", "/allexercises", params, "Failed to fetch exercises")


def _upstream_error(resp: httpx.Response) -> str | None:
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return None


def get_ninjas() -> NinjasClient:
    return current_app.extensions[EXTENSION_KEY]


__all__ = ["Envelope", "NinjasClient", "get_ninjas"]
