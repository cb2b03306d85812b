"""Shared test fixtures."""

from __future__ import annotations

import httpx
import pytest

from lms_core.profiles import ProfileClient

ALICE = {
    "id": "u1",
    "full_name": "Alice Tan",
    "email": "alice@example.com",
    "role": "student",
    "ic_number": "900101-14-5678",
    "address": "Kuala Lumpur",
    "approved": True,
    "created_at": "2025-01-05T10:00:00+00:00",
    "updated_at": "2025-01-05T10:00:00+00:00",
}


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeBackend:
    """PostgREST stand-in for ``/rest/v1/profiles`` backed by a dict of rows."""

    def __init__(self, rows: dict[str, dict] | None = None) -> None:
        self.rows = rows if rows is not None else {"u1": dict(ALICE)}
        self.requests: list[httpx.Request] = []
        self.fail_with: int | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"message": "boom"})
        user_id = request.url.params["id"].removeprefix("eq.")
        row = self.rows.get(user_id)
        return httpx.Response(200, json=[row] if row else [])

    def client(self) -> ProfileClient:
        return ProfileClient(
            base_url="http://backend.test",
            anon_key="anon-key",
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def alice():
    return dict(ALICE)
