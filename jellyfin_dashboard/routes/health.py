"""Health and readiness check routes."""

import logging

from fastapi import APIRouter, Request

from jellyfin_dashboard.errors import DashboardError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/ready")
async def ready(request: Request) -> dict:
    """Lightweight readiness check — no external calls."""
    settings = request.app.state.settings
    return {"status": "ok", "service": "jellyfin-dashboard", "commit": settings.git_sha}


@router.get("/health")
async def health(request: Request) -> dict:
    """Deep health check that verifies Jellyfin connectivity."""
    settings = request.app.state.settings
    result = {
        "status": "ok",
        "service": "jellyfin-dashboard",
        "commit": settings.git_sha,
        "jellyfin": "not_tested",
        "cache": request.app.state.latest_cache.snapshot(),
    }

    try:
        result["jellyfin_response"] = await request.app.state.jellyfin.ping()
        result["jellyfin"] = "connected"
    except DashboardError as e:
        logger.warning("Jellyfin health check failed: %s", e)
        result["jellyfin"] = "error"
        result["jellyfin_error"] = str(e)

    return result
