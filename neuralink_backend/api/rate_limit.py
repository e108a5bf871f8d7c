# This file implements the per-client request budget applied in front of the API routes.
# It exists as a pluggable policy so deployments and tests can swap the limiter without touching routing.
# The default is a fixed window per client key, reset when the window elapses.

from __future__ import annotations

import math
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    reset_after_seconds: int


class RateLimitPolicy(Protocol):
    def check(self, client_key: str) -> RateLimitDecision: ...


class UnlimitedPolicy:
    """Policy that admits every request."""

    def check(self, client_key: str) -> RateLimitDecision:
        return RateLimitDecision(allowed=True, limit=0, remaining=0, reset_after_seconds=0)


@dataclass
class _Window:
    started_at: float
    count: int


class FixedWindowRateLimiter:
    """Allow `max_requests` per client key within each `window_seconds` window."""

    def __init__(
        self,
        *,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests <= 0:
            raise ValueError("max_requests must be greater than 0.")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be greater than 0.")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()

    def check(self, client_key: str) -> RateLimitDecision:
        now = self._clock()
        with self._lock:
            self._evict_expired(now)
            window = self._windows.get(client_key)
            if window is None:
                window = _Window(started_at=now, count=0)
                self._windows[client_key] = window
            window.count += 1
            count = window.count
            elapsed = now - window.started_at

        reset_after = max(0, math.ceil(self.window_seconds - elapsed))
        return RateLimitDecision(
            allowed=count <= self.max_requests,
            limit=self.max_requests,
            remaining=max(0, self.max_requests - count),
            reset_after_seconds=reset_after,
        )

    def _evict_expired(self, now: float) -> None:
        expired = [
            key
            for key, window in self._windows.items()
            if now - window.started_at >= self.window_seconds
        ]
        for key in expired:
            del self._windows[key]
