import httpx
import pytest

from jellyfin_dashboard.config import Settings
from jellyfin_dashboard.errors import ConfigError, DecodeError, NetworkError, UnknownMediaTypeError
from jellyfin_dashboard.services.jellyfin import JellyfinClient, resolve_item_type

from conftest import BASE_URL, ENV

pytestmark = pytest.mark.anyio


def _client(settings, transport) -> JellyfinClient:
    return JellyfinClient(settings, httpx.AsyncClient(transport=transport))


async def test_fetch_latest_builds_authenticated_request(settings, upstream, transport):
    items = await _client(settings, transport).fetch_latest()

    assert [i.id for i in items] == ["M1", "E1"]
    request = upstream.requests[0]
    assert str(request.url).startswith(f"{BASE_URL}/Users/user-1/Items/Latest")
    assert request.url.params["Limit"] == "20"
    assert "IncludeItemTypes" not in request.url.params
    assert request.headers["X-Emby-Token"] == "secret-token"


async def test_fetch_latest_scopes_item_type(settings, upstream, transport):
    await _client(settings, transport).fetch_latest("Movie")
    assert upstream.requests[0].url.params["IncludeItemTypes"] == "Movie"


async def test_missing_user_id_is_config_error(upstream, transport):
    settings = Settings({**ENV, "JELLYFIN_USERID": ""})
    with pytest.raises(ConfigError):
        await _client(settings, transport).fetch_latest()
    assert upstream.requests == []


async def test_transport_failure_is_network_error(settings, upstream, transport):
    upstream.error = httpx.ConnectError("connection refused")
    with pytest.raises(NetworkError):
        await _client(settings, transport).fetch_latest()


async def test_error_status_is_network_error(settings, upstream, transport):
    upstream.status_code = 401
    with pytest.raises(NetworkError, match="401"):
        await _client(settings, transport).fetch_latest()


@pytest.mark.parametrize("body", [b"<html>oops</html>", b'{"Items": []}', b'[42]'])
async def test_unexpected_body_is_decode_error(settings, upstream, transport, body):
    upstream.body = body
    with pytest.raises(DecodeError):
        await _client(settings, transport).fetch_latest()


async def test_item_without_id_is_kept(settings, upstream, transport):
    upstream.items = [{"Name": "Untitled", "Type": "Movie"}, {"Id": None, "Name": "Null id"}]
    items = await _client(settings, transport).fetch_latest()
    assert [(i.id, i.name) for i in items] == [("", "Untitled"), ("", "Null id")]


async def test_null_body_is_empty_shelf(settings, upstream, transport):
    upstream.body = b"null"
    assert await _client(settings, transport).fetch_latest() == []


async def test_latest_cards_transforms(settings, transport):
    cards = await _client(settings, transport).latest_cards("")
    assert cards[0].image == f"{BASE_URL}/Items/M1/Images/Primary?width=300"
    assert cards[1].image == f"{BASE_URL}/Items/S1/Images/Primary?width=300"


async def test_ping(settings, transport):
    assert await _client(settings, transport).ping() == "Jellyfin Server"


def test_resolve_item_type():
    assert resolve_item_type("") == ""
    assert resolve_item_type("movies") == "Movie"
    assert resolve_item_type("tv") == "Series"
    assert resolve_item_type("music") == "MusicAlbum"
    assert resolve_item_type("books") == "Book"
    with pytest.raises(UnknownMediaTypeError):
        resolve_item_type("podcasts")
