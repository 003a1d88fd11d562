"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class DashboardError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(DashboardError):
    """Required configuration is missing."""


class NetworkError(DashboardError):
    """Jellyfin could not be reached or refused the request."""


class DecodeError(DashboardError):
    """Jellyfin answered with a body we could not decode."""


class UnknownMediaTypeError(DashboardError):
    def __init__(self, media: str, supported: list[str]):
        super().__init__(
            f"Unknown media type: {media}. Supported: {sorted(supported)}",
            status_code=404,
        )


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(DashboardError)
    async def handle_dashboard_error(_request: Request, exc: DashboardError):
        return PlainTextResponse(str(exc), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return PlainTextResponse("Internal server error", status_code=500)
