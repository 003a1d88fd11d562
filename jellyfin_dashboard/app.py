"""FastAPI application entry point for the Jellyfin dashboard."""

import logging
import sys

import httpx
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from jellyfin_dashboard import __version__
from jellyfin_dashboard.config import Settings, settings as default_settings
from jellyfin_dashboard.errors import ConfigError, register_error_handlers
from jellyfin_dashboard.services.cache import LatestCache
from jellyfin_dashboard.services.jellyfin import JellyfinClient

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    # Structured logging: JSON for production, human-readable for local
    if settings.is_production:
        logging.basicConfig(
            level=logging.INFO,
            format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
            stream=sys.stdout,
        )
    else:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings)
    app = FastAPI(title="Jellyfin Dashboard", version=__version__)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    # One upstream client and one cache per process, shared by every request
    http = httpx.AsyncClient(timeout=settings.jellyfin_timeout, transport=transport)
    jellyfin = JellyfinClient(settings, http)
    app.state.settings = settings
    app.state.jellyfin = jellyfin
    app.state.latest_cache = LatestCache(jellyfin.latest_cards)

    from jellyfin_dashboard.routes.dashboard import router as dashboard_router
    from jellyfin_dashboard.routes.health import router as health_router
    from jellyfin_dashboard.routes.latest import router as latest_router

    app.include_router(health_router)
    app.include_router(latest_router)
    app.include_router(dashboard_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        problems = settings.validate()
        if problems:
            raise ConfigError(f"Missing or invalid environment variables: {', '.join(problems)}")

    @app.on_event("shutdown")
    async def _close_http() -> None:
        await http.aclose()

    return app


def main() -> None:
    configure_logging(default_settings)
    problems = default_settings.validate()
    if problems:
        logger.error("Missing or invalid environment variables: %s", ", ".join(problems))
        sys.exit(1)

    port = default_settings.port
    logger.info("Jellyfin Dashboard running on :%d", port)
    logger.info("  Dashboard: http://localhost:%d/", port)
    logger.info("  JSON API:  http://localhost:%d/latest", port)
    uvicorn.run(create_app(default_settings), host=default_settings.host, port=port)


if __name__ == "__main__":
    main()
