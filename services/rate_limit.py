"""
Fixed-window in-memory rate limiter.
Counts requests per identifier; the window starts on the first request and
resets once it expires. Expired entries are swept from inside check() at most
once per cleanup_interval. Process-local: each worker keeps its own counters.
"""
from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass
from typing import Callable

from fastapi import HTTPException, Request

from config import settings


@dataclass
class RateLimitResult:
    success: bool
    limit: int
    remaining: int
    reset_in: int

    def headers(self) -> dict[str, str]:
        return {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(self.reset_in),
        }


@dataclass
class _Entry:
    count: int
    reset_at: float


class RateLimiter:
    def __init__(
        self,
        limit: int,
        window_seconds: int,
        clock: Callable[[], float] = time.monotonic,
        cleanup_interval: float = 60,
    ):
        self.limit = limit
        self.window_seconds = window_seconds
        self.cleanup_interval = cleanup_interval
        self._clock = clock
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._last_cleanup = clock()

    def check(self, identifier: str) -> RateLimitResult:
        now = self._clock()
        with self._lock:
            if now - self._last_cleanup >= self.cleanup_interval:
                self._purge_locked(now)
            entry = self._entries.get(identifier)
            if entry is None or entry.reset_at <= now:
                self._entries[identifier] = _Entry(count=1, reset_at=now + self.window_seconds)
                return RateLimitResult(True, self.limit, self.limit - 1, self.window_seconds)

            entry.count += 1
            reset_in = math.ceil(entry.reset_at - now)
            if entry.count > self.limit:
                return RateLimitResult(False, self.limit, 0, reset_in)
            return RateLimitResult(True, self.limit, self.limit - entry.count, reset_in)

    def purge_expired(self) -> int:
        """Drop entries whose window has passed; returns how many were removed."""
        now = self._clock()
        with self._lock:
            return self._purge_locked(now)

    def _purge_locked(self, now: float) -> int:
        stale = [k for k, e in self._entries.items() if e.reset_at <= now]
        for k in stale:
            del self._entries[k]
        self._last_cleanup = now
        return len(stale)

    def reset(self) -> None:
        with self._lock:
            self._entries.clear()


general_api_limiter = RateLimiter(settings.rate_limit_requests, settings.rate_limit_window_seconds)


async def general_rate_limit(request: Request) -> RateLimitResult:
    """FastAPI dependency: 429 once the caller's host exceeds the general limit."""
    identifier = request.client.host if request.client else "anonymous"
    result = general_api_limiter.check(identifier)
    if not result.success:
        raise HTTPException(
            status_code=429,
            detail=f"Rate limit exceeded. Try again in {result.reset_in} seconds.",
            headers={**result.headers(), "Retry-After": str(result.reset_in)},
        )
    return result
