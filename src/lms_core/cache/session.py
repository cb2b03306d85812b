"""Single-slot TTL holder for the current auth session."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import Generic, TypeVar

S = TypeVar("S")


class SessionCache(Generic[S]):
    """Keeps one session object for at most ``ttl_seconds``.

    Filled by ``ProfileService.signed_in`` and emptied by ``signed_out``.
    """

    def __init__(
        self,
        ttl_seconds: float = 600.0,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._slot: tuple[float, S] | None = None
        self._lock = threading.Lock()

    def _now(self) -> float:
        if self._clock is not None:
            return self._clock()
        return time.monotonic()

    def get(self) -> S | None:
        now = self._now()
        with self._lock:
            if self._slot is None:
                return None
            ts, session = self._slot
            if now - ts > self._ttl:
                self._slot = None
                return None
            return session

    def set(self, session: S) -> None:
        slot = (self._now(), session)
        with self._lock:
            self._slot = slot

    def clear(self) -> None:
        with self._lock:
            self._slot = None
