"""Profile model — one row of the backend's ``profiles`` table."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

Role = Literal["student", "teacher", "admin"]


class Profile(BaseModel):
    """An LMS user profile."""

    model_config = ConfigDict(extra="ignore")

    id: str
    full_name: str
    email: str
    role: Role
    ic_number: str | None = None
    address: str | None = None
    approved: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
