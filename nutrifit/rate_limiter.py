"""RateLimiter protocol (allow/retry_after) and a backend factory selecting memory or noop."""
from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from .http_errors import retry_after_seconds

log = logging.getLogger(__name__)


class RateLimitError(Exception):
    """Raised when a request exceeds the configured rate limit.

    Attributes:
        retry_after: Seconds the client is told to wait.
        limit: Name of the tier that blocked the request.
    """
    def __init__(self, message: str, retry_after: int, limit: str | None = None) -> None:
        super().__init__(message)
        self.retry_after = retry_after
        self.limit = limit


@runtime_checkable
class RateLimiter(Protocol):
    def allow(self, key: str, quota: int, window_ms: int) -> bool: ...  # pragma: no cover
    def retry_after(self, key: str, window_ms: int) -> int: ...  # pragma: no cover


class NoopRateLimiter:
    """Always allows; selected with RATE_LIMIT_BACKEND=noop."""

    def allow(self, key: str, quota: int, window_ms: int) -> bool:
        return True

    def retry_after(self, key: str, window_ms: int) -> int:
        return retry_after_seconds(window_ms)


def build_rate_limiter(backend: str) -> RateLimiter:
    backend = (backend or "memory").strip().lower()
    if backend == "noop":
        return NoopRateLimiter()
    if backend != "memory":
        log.warning("Unknown RATE_LIMIT_BACKEND=%r; using in-memory limiter", backend)
    from .rate_limiter_memory import MemoryRateLimiter  # local import keeps the protocol module light
    return MemoryRateLimiter()


__all__ = [
    "RateLimiter",
    "RateLimitError",
    "NoopRateLimiter",
    "build_rate_limiter",
]
