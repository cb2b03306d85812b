"""Cache-first profile lookups."""

from __future__ import annotations

from typing import Any

import structlog

from lms_core.cache import SessionCache, TTLCache
from lms_core.profiles.client import BackendError, ProfileClient, ProfileNotFound
from lms_core.profiles.models import Profile

log = structlog.get_logger("profile_service")


class ProfileService:
    """Wraps a ProfileClient with a profile TTL cache and the session slot.

    Failed lookups are logged and reported as ``None``; they are never
    cached, so the next call retries the backend.
    """

    def __init__(
        self,
        client: ProfileClient,
        profiles: TTLCache[Profile],
        sessions: SessionCache[Any] | None = None,
    ) -> None:
        self.client = client
        self.profiles = profiles
        self.sessions = sessions if sessions is not None else SessionCache()

    async def get_profile(self, user_id: str) -> Profile | None:
        cached = self.profiles.get(user_id)
        if cached is not None:
            return cached

        try:
            profile = await self.client.fetch_profile(user_id)
        except ProfileNotFound:
            log.warning("profile_not_found", user_id=user_id)
            return None
        except BackendError:
            log.error("profile_fetch_failed", user_id=user_id, exc_info=True)
            return None

        self.profiles.set(user_id, profile)
        return profile

    async def refresh_profile(self, user_id: str) -> Profile | None:
        """Drop the cached copy and fetch a fresh one."""
        self.profiles.invalidate(user_id)
        return await self.get_profile(user_id)

    def profile_changed(self, user_id: str) -> None:
        self.profiles.invalidate(user_id)

    async def signed_in(self, user_id: str, session: Any) -> Profile | None:
        """Remember *session* as the current one and load its user's profile."""
        self.sessions.set(session)
        return await self.get_profile(user_id)

    def current_session(self) -> Any | None:
        return self.sessions.get()

    def signed_out(self) -> None:
        """Forget every cached profile and the current session."""
        self.profiles.clear_all()
        self.sessions.clear()
        log.info("caches_cleared", reason="signed_out")
