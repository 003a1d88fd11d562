"""Latest-items JSON API.

GET /latest            → all item types
GET /latest/{media}    → movies | tv | music | books
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from jellyfin_dashboard.services.cache import LatestCache
from jellyfin_dashboard.services.jellyfin import resolve_item_type

router = APIRouter()


def get_cache(request: Request) -> LatestCache:
    return request.app.state.latest_cache


async def _respond(cache: LatestCache, item_type: str) -> JSONResponse:
    cards = await cache.get_or_refresh(item_type)
    return JSONResponse(
        {"items": [card.to_json() for card in cards]},
        headers={"Access-Control-Allow-Origin": "*"},
    )


@router.get("/latest")
async def latest(cache: LatestCache = Depends(get_cache)) -> JSONResponse:
    return await _respond(cache, "")


@router.get("/latest/{media}")
async def latest_by_media(media: str, cache: LatestCache = Depends(get_cache)) -> JSONResponse:
    return await _respond(cache, resolve_item_type(media))
