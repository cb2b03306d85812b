"""Profile client — PostgREST endpoint of the hosted backend."""

from __future__ import annotations

import httpx

from lms_core.profiles.models import Profile


class BackendError(Exception):
    """The backend could not be reached or answered with a non-2xx status."""


class ProfileNotFound(Exception):
    """No ``profiles`` row exists for the requested id."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"No profile for user {user_id!r}")
        self.user_id = user_id


class ProfileClient:
    """Async client for ``/rest/v1/profiles``."""

    def __init__(
        self,
        base_url: str = "http://localhost:54321",
        anon_key: str = "",
        timeout_s: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.anon_key = anon_key
        self.timeout_s = timeout_s
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def _get_http(self) -> httpx.AsyncClient:
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(
                timeout=self.timeout_s,
                headers=self._headers(),
                transport=self._transport,
            )
        return self._http

    def _headers(self) -> dict[str, str]:
        if not self.anon_key:
            return {}
        return {"apikey": self.anon_key, "Authorization": f"Bearer {self.anon_key}"}

    async def close(self) -> None:
        if self._http and not self._http.is_closed:
            await self._http.aclose()

    async def fetch_profile(self, user_id: str) -> Profile:
        """Fetch a single profile row.

        Raises ProfileNotFound when the query matches nothing and
        BackendError on transport failures, error statuses, or a body
        that does not parse into a Profile.
        """
        http = await self._get_http()
        try:
            resp = await http.get(
                f"{self.base_url}/rest/v1/profiles",
                params={"id": f"eq.{user_id}", "select": "*"},
            )
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise BackendError(f"profile lookup failed for {user_id!r}: {e}") from e

        try:
            rows = resp.json()
        except ValueError as e:
            raise BackendError(f"malformed body for {user_id!r}: {e}") from e
        if not isinstance(rows, list):
            raise BackendError(f"expected a list of rows for {user_id!r}, got {type(rows).__name__}")
        if not rows:
            raise ProfileNotFound(user_id)

        # pydantic ValidationError is a ValueError
        try:
            return Profile.model_validate(rows[0])
        except ValueError as e:
            raise BackendError(f"unexpected profile row for {user_id!r}: {e}") from e
