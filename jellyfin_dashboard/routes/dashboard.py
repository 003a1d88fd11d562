"""Serves the static carousel page; it polls /latest on its own.

Include this router last: the catch-all answers every GET path the API
routers don't claim.
"""

from functools import lru_cache
from importlib.resources import files

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()


@lru_cache(maxsize=1)
def _dashboard_html() -> str:
    return files("jellyfin_dashboard").joinpath("static/dashboard.html").read_text(encoding="utf-8")


@router.get("/", response_class=HTMLResponse)
@router.get("/dashboard", response_class=HTMLResponse)
@router.get("/{path:path}", response_class=HTMLResponse, include_in_schema=False)
async def dashboard() -> HTMLResponse:
    return HTMLResponse(_dashboard_html())
