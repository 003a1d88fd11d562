"""Jellyfin API client for the "recently added" shelf.

One authenticated GET per fetch, no retries. Transport problems surface as
NetworkError, unusable bodies as DecodeError.
"""

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from jellyfin_dashboard.config import Settings
from jellyfin_dashboard.errors import ConfigError, DecodeError, NetworkError, UnknownMediaTypeError
from jellyfin_dashboard.models import Card, JellyfinItem
from jellyfin_dashboard.services.cards import to_cards

logger = logging.getLogger(__name__)

LATEST_LIMIT = 20

# Route slug → Jellyfin IncludeItemTypes value. Adding a media type is a
# one-line change here; the routes and the dashboard tabs follow the slug.
ITEM_TYPE_FILTERS = {
    "movies": "Movie",
    "tv": "Series",
    "music": "MusicAlbum",
    "books": "Book",
}

# Jellyfin may answer `null` for an empty shelf.
_items_adapter = TypeAdapter(list[JellyfinItem] | None)


def resolve_item_type(media: str) -> str:
    """Map a route slug to a Jellyfin item type ("" means all types)."""
    if not media:
        return ""
    item_type = ITEM_TYPE_FILTERS.get(media.lower())
    if item_type is None:
        raise UnknownMediaTypeError(media, list(ITEM_TYPE_FILTERS))
    return item_type


class JellyfinClient:
    def __init__(self, settings: Settings, http: httpx.AsyncClient):
        self._settings = settings
        self._http = http

    async def fetch_latest(self, item_type: str = "") -> list[JellyfinItem]:
        """Fetch up to LATEST_LIMIT latest items, optionally of one item type."""
        user_id = self._settings.jellyfin_user_id
        if not user_id:
            raise ConfigError("JELLYFIN_USERID environment variable is not set")

        url = f"{self._settings.jellyfin_url}/Users/{user_id}/Items/Latest"
        params: dict = {"Limit": LATEST_LIMIT}
        if item_type:
            params["IncludeItemTypes"] = item_type

        logger.info("Fetching latest Jellyfin items (type=%s)", item_type or "all")
        try:
            resp = await self._http.get(
                url,
                params=params,
                headers={"X-Emby-Token": self._settings.jellyfin_token},
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("Jellyfin returned HTTP %d for %s", e.response.status_code, url)
            raise NetworkError(f"Jellyfin returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning("Jellyfin request failed: %s", e)
            raise NetworkError(f"Jellyfin request failed: {e}") from e

        try:
            items = _items_adapter.validate_json(resp.content) or []
        except ValidationError as e:
            logger.warning("Unexpected Jellyfin response body: %s", e)
            raise DecodeError(f"Could not decode Jellyfin response: {e.error_count()} error(s)") from e

        logger.debug("Jellyfin returned %d items", len(items))
        return items

    async def latest_cards(self, item_type: str = "") -> list[Card]:
        """Fetch and transform in one step — the loader behind LatestCache."""
        items = await self.fetch_latest(item_type)
        return to_cards(items, self._settings.jellyfin_url, self._settings.poster_image_size)

    async def ping(self) -> str:
        """Hit /System/Ping; returns the server's reply text."""
        try:
            resp = await self._http.get(f"{self._settings.jellyfin_url}/System/Ping")
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise NetworkError(f"Jellyfin ping failed: {e}") from e
        return resp.text.strip().strip('"')
