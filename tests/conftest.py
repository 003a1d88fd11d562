import json

import httpx
import pytest

from jellyfin_dashboard.config import Settings

BASE_URL = "http://jellyfin.local:8096"

ENV = {
    "JELLYFIN_URL": BASE_URL + "/",
    "JELLYFIN_TOKEN": "secret-token",
    "JELLYFIN_USERID": "user-1",
    "POSTER_IMAGE_SIZE": "?width=300",
}

MOVIE = {
    "Id": "M1",
    "Name": "Arrival",
    "Type": "Movie",
    "ImageTags": {"Primary": "abc"},
    "CommunityRating": 7.9,
    "OfficialRating": "PG-13",
    "PremiereDate": "2016-11-10T00:00:00.0000000Z",
}

EPISODE = {
    "Id": "E1",
    "Name": "Pilot",
    "Type": "Episode",
    "SeriesId": "S1",
    "ImageTags": {},
    "CommunityRating": 0,
    "PremiereDate": "",
}


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(ENV)


class FakeJellyfin:
    """httpx.MockTransport handler that records requests and replays a body."""

    def __init__(self, items=None):
        self.items = [MOVIE, EPISODE] if items is None else items
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: bytes | None = None
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if request.url.path == "/System/Ping":
            return httpx.Response(200, text='"Jellyfin Server"')
        body = self.body if self.body is not None else json.dumps(self.items).encode()
        return httpx.Response(self.status_code, content=body)

    @property
    def latest_calls(self) -> int:
        return sum(1 for r in self.requests if r.url.path.endswith("/Items/Latest"))


@pytest.fixture
def upstream():
    return FakeJellyfin()


@pytest.fixture
def transport(upstream):
    return httpx.MockTransport(upstream)
