"""In-process memory rate limiter.

Each key owns a window that opens on its first request and closes
``window_ms`` later; the next request after that opens a fresh window.
Closed windows are swept at most once per ``sweep_interval`` seconds.
Single-process only: a multi-instance deployment would need a shared store.
"""
from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import Dict, Tuple

from .http_errors import retry_after_seconds


class MemoryRateLimiter:
    def __init__(self, clock: Callable[[], float] | None = None, sweep_interval: float = 60.0) -> None:
        # key -> (window_start, count, window_ms)
        self._windows: Dict[str, Tuple[float, int, int]] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self._sweep_interval = sweep_interval
        self._last_sweep = self._now()

    def _now(self) -> float:
        return self._clock() if self._clock is not None else time.time()

    def _sweep(self, now: float) -> None:
        # caller holds the lock
        stale = [k for k, (start, _, window_ms) in self._windows.items() if (now - start) * 1000 > window_ms]
        for k in stale:
            del self._windows[k]
        self._last_sweep = now

    def allow(self, key: str, quota: int, window_ms: int) -> bool:
        now = self._now()
        with self._lock:
            if now - self._last_sweep >= self._sweep_interval:
                self._sweep(now)
            start, count, _ = self._windows.get(key, (now, 0, window_ms))
            if (now - start) * 1000 > window_ms:
                start, count = now, 0
            count += 1
            self._windows[key] = (start, count, window_ms)
        return count <= quota

    def retry_after(self, key: str, window_ms: int) -> int:
        # Clients are always told to wait a full window
        return retry_after_seconds(window_ms)

    def count(self, key: str) -> int:
        with self._lock:
            cur = self._windows.get(key)
        return cur[1] if cur else 0

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._windows)


__all__ = ["MemoryRateLimiter"]
