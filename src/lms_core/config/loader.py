"""Config loader — reads YAML, applies LMS_* env var overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from lms_core.config.schema import LmsConfig

# env var -> (section, field); section None means top level
_ENV_OVERRIDES: dict[str, tuple[str | None, str]] = {
    "LMS_ENVIRONMENT": (None, "environment"),
    "LMS_BACKEND_URL": ("backend", "url"),
    "LMS_BACKEND_ANON_KEY": ("backend", "anon_key"),
    "LMS_PROFILE_TTL_S": ("cache", "profile_ttl_s"),
    "LMS_SESSION_TTL_S": ("cache", "session_ttl_s"),
    "LMS_LOG_LEVEL": ("logging", "level"),
    "LMS_LOG_FORMAT": ("logging", "format"),
}


def load_config(path: str | Path | None = None) -> LmsConfig:
    """Load config from a YAML file, then apply env var overrides.

    If *path* is None or the file doesn't exist, returns defaults.

    Environment variable overrides:
        LMS_ENVIRONMENT       -> environment
        LMS_BACKEND_URL       -> backend.url
        LMS_BACKEND_ANON_KEY  -> backend.anon_key
        LMS_PROFILE_TTL_S     -> cache.profile_ttl_s
        LMS_SESSION_TTL_S     -> cache.session_ttl_s
        LMS_LOG_LEVEL         -> logging.level
        LMS_LOG_FORMAT        -> logging.format
    """
    data: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p) as f:
                data = yaml.safe_load(f) or {}

    for var, (section, field) in _ENV_OVERRIDES.items():
        value = os.environ.get(var)
        if not value:
            continue
        if section is None:
            data[field] = value
        else:
            data.setdefault(section, {})[field] = value

    # Pydantic coerces the string TTLs to float
    return LmsConfig.model_validate(data)
