"""HTTP rate limiting by client address.

Three tiers share one window length and keep independent counters:
``general`` (every request), ``post`` (form submits and data lookups) and
``ai`` (completion-backed endpoints). Add ``@limit("post")`` to a view, or
call ``check_tier`` from a ``before_request`` hook.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from typing import Any

from flask import current_app, request

from .config import Config
from .rate_limiter import RateLimiter, RateLimitError

log = logging.getLogger(__name__)

TIERS_EXT = "nutrifit.rate_limit_tiers"
LIMITER_EXT = "nutrifit.rate_limiter"


@dataclass(frozen=True)
class Tier:
    name: str
    quota: int
    window_ms: int


def tiers_from_config(cfg: Config) -> dict[str, Tier]:
    window = cfg.rate_limit_window_ms
    return {
        "general": Tier("general", cfg.rate_limit_max_general, window),
        "post": Tier("post", cfg.rate_limit_max_post, window),
        "ai": Tier("ai", cfg.rate_limit_max_ai, window),
    }


def get_rate_limiter() -> RateLimiter:
    return current_app.extensions[LIMITER_EXT]


def client_address() -> str:
    return request.remote_addr or "unknown"


def check_tier(name: str) -> None:
    """Count this request against ``name``; raise RateLimitError when over quota."""
    tier: Tier = current_app.extensions[TIERS_EXT][name]
    key = f"{tier.name}:{client_address()}"
    rl = get_rate_limiter()
    if rl.allow(key, tier.quota, tier.window_ms):
        return
    log.warning("Rate limit exceeded tier=%s client=%s path=%s", tier.name, client_address(), request.path)
    raise RateLimitError(
        f"Rate limit exceeded for {tier.name}",
        retry_after=rl.retry_after(key, tier.window_ms),
        limit=tier.name,
    )


def limit(name: str):
    def decorator(fn: Callable[..., Any]):
        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any):
            check_tier(name)
            return fn(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["Tier", "tiers_from_config", "get_rate_limiter", "check_tier", "limit"]
