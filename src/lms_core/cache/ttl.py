"""In-memory TTL cache with lazy (read-time) expiry."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

import structlog

log = structlog.get_logger("ttl_cache")

V = TypeVar("V")


@dataclass
class CacheEntry(Generic[V]):
    """A stored value plus the clock reading taken when it was written."""

    value: V
    written_at: float


class TTLCache(Generic[V]):
    """Dict + monotonic clock TTL cache, guarded by a single lock.

    Entries are only checked for freshness when read. Keys that are written
    and never read again stay in memory until ``invalidate``, ``clear_all``
    or ``purge_expired`` removes them; there is no size bound.
    """

    def __init__(
        self,
        ttl_seconds: float = 900.0,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._store: dict[str, CacheEntry[V]] = {}
        self._lock = threading.Lock()

    @property
    def ttl(self) -> float:
        return self._ttl

    def _now(self) -> float:
        if self._clock is not None:
            return self._clock()
        return time.monotonic()

    def get(self, key: str) -> V | None:
        """Return cached value or ``None`` if missing / expired.

        An expired entry is deleted before ``None`` is returned.
        """
        now = self._now()
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                log.debug("cache_miss", key=key)
                return None
            if now - entry.written_at > self._ttl:
                del self._store[key]
                log.debug("cache_expired", key=key, age_s=now - entry.written_at)
                return None
            log.debug("cache_hit", key=key)
            return entry.value

    def set(self, key: str, value: V) -> None:
        """Store *value* under *key* with current timestamp."""
        entry = CacheEntry(value=value, written_at=self._now())
        with self._lock:
            self._store[key] = entry

    def invalidate(self, key: str) -> None:
        """Remove a single key (no-op if absent)."""
        with self._lock:
            self._store.pop(key, None)

    def clear_all(self) -> None:
        """Drop all entries."""
        with self._lock:
            self._store.clear()

    def purge_expired(self) -> int:
        """Delete every stale entry now; returns how many were removed.

        Never called by the cache itself.
        """
        now = self._now()
        with self._lock:
            stale = [k for k, e in self._store.items() if now - e.written_at > self._ttl]
            for key in stale:
                del self._store[key]
        if stale:
            log.debug("cache_purged", removed=len(stale))
        return len(stale)

    def __len__(self) -> int:
        # Counts stale-but-unread entries too.
        with self._lock:
            return len(self._store)
