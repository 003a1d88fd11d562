"""Centralized configuration — all env vars in one place."""

import os
from collections.abc import Callable, Mapping

REQUIRED_VARS = ("JELLYFIN_URL", "JELLYFIN_TOKEN", "JELLYFIN_USERID")


class Settings:
    """Application settings loaded from environment variables.

    Malformed numeric values fall back to their default and are reported by
    ``validate()``, so importing this module never fails.
    """

    def __init__(self, environ: Mapping[str, str] | None = None):
        env = os.environ if environ is None else environ
        self.invalid: list[str] = []

        self.cors_origins: list[str] = env.get("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = env.get("GIT_SHA", "unknown")
        self.environment: str = env.get("ENVIRONMENT", "local")
        self.host: str = env.get("HOST", "0.0.0.0")
        self.port: int = self._parse(env, "PORT", int, 7654)

        # Jellyfin
        self.jellyfin_url: str = env.get("JELLYFIN_URL", "").rstrip("/")
        self.jellyfin_token: str = env.get("JELLYFIN_TOKEN", "")
        self.jellyfin_user_id: str = env.get("JELLYFIN_USERID", "")
        self.poster_image_size: str = env.get("POSTER_IMAGE_SIZE", "")
        self.jellyfin_timeout: float = self._parse(env, "JELLYFIN_TIMEOUT_SECONDS", float, 5.0)

    def _parse(self, env: Mapping[str, str], var: str, cast: Callable, default):
        raw = env.get(var)
        if raw is None or raw == "":
            return default
        try:
            return cast(raw)
        except ValueError:
            self.invalid.append(var)
            return default

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return missing required env vars followed by malformed ones."""
        missing = [var for var in REQUIRED_VARS if not getattr(self, _attr_for(var))]
        return missing + self.invalid


settings = Settings()


def _attr_for(env_var: str) -> str:
    """Map env var name to Settings attribute name."""
    mapping = {
        "JELLYFIN_URL": "jellyfin_url",
        "JELLYFIN_TOKEN": "jellyfin_token",
        "JELLYFIN_USERID": "jellyfin_user_id",
    }
    return mapping.get(env_var, env_var.lower())
