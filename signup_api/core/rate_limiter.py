"""Fixed-window, per-client request limits kept in process memory."""
from __future__ import annotations

import threading
import time
from typing import Iterable

from fastapi import HTTPException, Request

from signup_api.core.config import get_settings


class FixedWindowLimiter:
    """Counts hits per key inside a window; expired windows are dropped on each check."""

    def __init__(self, clock=time.monotonic) -> None:
        self._clock = clock
        self._windows: dict[str, tuple[int, float]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._windows)

    def _prune(self, now: float) -> None:
        expired = [key for key, (_, ends_at) in self._windows.items() if ends_at <= now]
        for key in expired:
            del self._windows[key]

    def hit(self, key: str, limit: int, window_seconds: int) -> bool:
        """Record one hit for ``key``; False once the window's limit is exceeded."""
        if limit <= 0:
            return True
        now = self._clock()
        with self._lock:
            self._prune(now)
            count, ends_at = self._windows.get(key, (0, now + window_seconds))
            self._windows[key] = (count + 1, ends_at)
            return count + 1 <= limit

    def clear(self) -> None:
        with self._lock:
            self._windows.clear()


_limiter = FixedWindowLimiter()


def client_ip(request: Request, trusted_proxies: Iterable[str] = ()) -> str:
    """Peer address, or the nearest untrusted X-Forwarded-For hop when the peer is a trusted proxy."""
    trusted = set(trusted_proxies)
    peer = request.client.host if request.client and request.client.host else "unknown"
    if peer not in trusted:
        return peer
    hops = [hop.strip() for hop in request.headers.get("x-forwarded-for", "").split(",") if hop.strip()]
    for hop in reversed(hops):
        if hop not in trusted:
            return hop
    return peer


def rate_limit_ip(request: Request, scope: str, *, limit: int, window_seconds: int) -> None:
    key = f"{scope}:{client_ip(request, get_settings().trusted_proxies)}"
    if not _limiter.hit(key, limit, window_seconds):
        raise HTTPException(429, "Too many requests. Try again shortly.")


def reset_rate_limits() -> None:
    """Forget every recorded hit (used between test runs)."""
    _limiter.clear()
