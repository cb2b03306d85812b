"""FastAPI application exposing cached profile lookups."""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from lms_core.cache import SessionCache, TTLCache
from lms_core.config import LmsConfig, load_config
from lms_core.profiles import Profile, ProfileClient, ProfileService

logger = structlog.get_logger()


def create_app(
    config: LmsConfig | None = None,
    client: ProfileClient | None = None,
) -> FastAPI:
    """Build the app with its own caches and backend client on ``app.state``."""
    config = config or load_config()
    client = client or ProfileClient(
        base_url=config.backend.url,
        anon_key=config.backend.anon_key,
        timeout_s=config.backend.timeout_s,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("API starting", backend=config.backend.url)
        yield
        await client.close()

    app = FastAPI(
        title="LMS Profile API",
        description="Cached profile lookups for the LMS backend",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.profile_cache = TTLCache[Profile](ttl_seconds=config.cache.profile_ttl_s)
    app.state.profiles = ProfileService(
        client=client,
        profiles=app.state.profile_cache,
        sessions=SessionCache(ttl_seconds=config.cache.session_ttl_s),
    )

    _register_routes(app)
    return app


def _service(request: Request) -> ProfileService:
    return request.app.state.profiles


def _register_routes(app: FastAPI) -> None:
    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.get("/api/profiles/{user_id}", response_model=Profile)
    async def get_profile(user_id: str, request: Request):
        profile = await _service(request).get_profile(user_id)
        if profile is None:
            raise HTTPException(status_code=404, detail="Profile not found")
        return profile

    @app.post("/api/profiles/{user_id}/refresh", response_model=Profile)
    async def refresh_profile(user_id: str, request: Request):
        """Bypass the cache and re-fetch from the backend."""
        profile = await _service(request).refresh_profile(user_id)
        if profile is None:
            raise HTTPException(status_code=404, detail="Profile not found")
        return profile

    @app.delete("/api/cache/profiles/{user_id}", status_code=204)
    async def invalidate_profile(user_id: str, request: Request):
        _service(request).profile_changed(user_id)
        return Response(status_code=204)

    @app.delete("/api/cache/profiles", status_code=204)
    async def clear_profiles(request: Request):
        _service(request).signed_out()
        return Response(status_code=204)

    @app.get("/api/cache/stats")
    async def cache_stats(request: Request):
        cache: TTLCache[Profile] = request.app.state.profile_cache
        return {"entries": len(cache), "ttl_s": cache.ttl}
