"""Configuration schema — Pydantic models for config.yaml."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CacheConfig(BaseModel):
    profile_ttl_s: float = 15 * 60
    session_ttl_s: float = 10 * 60


class BackendConfig(BaseModel):
    url: str = "http://localhost:54321"
    anon_key: str = ""
    timeout_s: float = 15.0


class LoggingConfig(BaseModel):
    # None means "derive from environment"
    level: str | None = None
    format: str = "json"


class LmsConfig(BaseModel):
    environment: str = "production"
    cache: CacheConfig = Field(default_factory=CacheConfig)
    backend: BackendConfig = Field(default_factory=BackendConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    def log_level(self) -> str:
        """Explicit level if set; otherwise DEBUG in development, ERROR elsewhere."""
        if self.logging.level:
            return self.logging.level.upper()
        return "DEBUG" if self.is_development else "ERROR"
