"""Per-client sliding-window rate limiter."""

from __future__ import annotations

from collections import deque
from datetime import datetime, timedelta, timezone
from threading import Lock


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def client_identity(
    forwarded_for: str | None,
    real_ip: str | None = None,
    peer: str | None = None,
) -> str:
    """First X-Forwarded-For hop, then X-Real-IP, then the socket peer."""
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    if real_ip and real_ip.strip():
        return real_ip.strip()
    return peer or "unknown"


class SlidingWindowRateLimiter:
    """Allows ``limit`` requests per ``window_seconds`` for each client key."""

    def __init__(self, limit: int, window_seconds: int) -> None:
        self._limit = limit
        self._window = timedelta(seconds=window_seconds)
        self._hits: dict[str, deque[datetime]] = {}
        self._lock = Lock()
        self._last_cleanup: datetime = _utcnow()
        self._cleanup_interval_seconds = 300

    @property
    def retry_after_seconds(self) -> int:
        return int(self._window.total_seconds())

    def _prune(self, hits: deque[datetime], now: datetime) -> None:
        cutoff = now - self._window
        while hits and hits[0] <= cutoff:
            hits.popleft()

    def _cleanup_idle_keys(self, now: datetime) -> None:
        """Drop keys with no hits inside the window. Call while holding self._lock."""
        for key in list(self._hits):
            hits = self._hits[key]
            self._prune(hits, now)
            if not hits:
                del self._hits[key]

    def allow(self, key: str, now: datetime | None = None) -> bool:
        if now is None:
            now = _utcnow()
        with self._lock:
            if (now - self._last_cleanup).total_seconds() >= self._cleanup_interval_seconds:
                self._cleanup_idle_keys(now)
                self._last_cleanup = now

            hits = self._hits.setdefault(key, deque())
            self._prune(hits, now)
            if len(hits) >= self._limit:
                return False
            hits.append(now)
            return True

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()
