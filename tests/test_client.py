"""Tests for MangaloomClient dispatch, error mapping and hooks."""

import json

import httpx
import pytest

from conftest import BASE_URL, BURNING_ERROR_ENVELOPE, CHAPTER_ID, MANGA_ID, manga_envelope
from mangaloom.client import MangaloomClient
from mangaloom.config import ApiSettings
from mangaloom.endpoints import ENDPOINT_DEFINITIONS, ResponseShape, bind
from mangaloom.exceptions import (
    ApiError,
    MalformedResponseError,
    MissingCredentialsError,
    NetworkError,
    PingError,
    TimeoutError,
    TransportError,
)
from mangaloom.models.at_home import AtHomeServer
from mangaloom.models.manga import MangaData, MangaQuery
from mangaloom.unwrapper import Err, Ok, Page

AUTH_REQUIRED = sorted(
    name for name, definition in ENDPOINT_DEFINITIONS.items() if definition.requires_auth
)


@pytest.mark.asyncio
@pytest.mark.parametrize("name", AUTH_REQUIRED)
async def test_auth_required_endpoint_without_token_sends_nothing(
    client: MangaloomClient, httpx_mock, name: str
):
    """Every auth-required endpoint fails locally when no token is stored."""
    definition = ENDPOINT_DEFINITIONS[name]
    endpoint = definition.bind(name=name, **{param: "x" for param in definition.path_params})

    with pytest.raises(MissingCredentialsError):
        await client.dispatch(endpoint)

    assert httpx_mock.get_requests() == []


@pytest.mark.asyncio
async def test_get_single_item(client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(
        method="GET", url=f"{BASE_URL}/manga/{MANGA_ID}", json=manga_envelope()
    )

    manga = await client.dispatch(bind("manga.get", id=MANGA_ID))

    assert isinstance(manga, MangaData)
    assert manga.data.attributes.title["en"] == "Solo Leveling"
    request = httpx_mock.get_request()
    assert "Authorization" not in request.headers
    assert request.headers["User-Agent"] == client._settings.user_agent


@pytest.mark.asyncio
async def test_bearer_token_attached_when_stored(authed_client: MangaloomClient, httpx_mock):
    """The session token is sent even on endpoints that do not require it."""
    httpx_mock.add_response(url=f"{BASE_URL}/manga/{MANGA_ID}", json=manga_envelope())

    await authed_client.manga.get(MANGA_ID)

    assert httpx_mock.get_request().headers["Authorization"] == "Bearer sessiontoken"


@pytest.mark.asyncio
async def test_query_is_encoded(client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(
        method="GET",
        json={"results": [manga_envelope()], "limit": 1, "offset": 0, "total": 1},
    )

    page = await client.manga.list(
        MangaQuery(title="Solo", limit=1, includedTags=[MANGA_ID, CHAPTER_ID])
    )

    assert isinstance(page, Page)
    assert isinstance(page.results[0], Ok)
    request = httpx_mock.get_request()
    assert request.url.path == "/manga"
    assert request.url.params["title"] == "Solo"
    assert request.url.params["limit"] == "1"
    assert request.url.params.get_list("includedTags[]") == [MANGA_ID, CHAPTER_ID]


@pytest.mark.asyncio
async def test_body_is_sent_as_json(authed_client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(
        method="POST", url=f"{BASE_URL}/user/password", json={"result": "ok"}
    )

    result = await authed_client.user.update_password("old-password", "new-password")

    assert result is None
    request = httpx_mock.get_request()
    assert json.loads(request.content) == {
        "oldPassword": "old-password",
        "newPassword": "new-password",
    }


@pytest.mark.asyncio
async def test_error_envelope_with_error_status(client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(
        url=f"{BASE_URL}/manga/{MANGA_ID}", status_code=503, json=BURNING_ERROR_ENVELOPE
    )

    with pytest.raises(ApiError) as exc_info:
        await client.manga.get(MANGA_ID)

    error = exc_info.value
    assert error.status_code == 503
    assert len(error.errors) == 1
    assert error.errors[0].detail == "Servers are burning"
    assert error.response is not None


@pytest.mark.asyncio
async def test_error_envelope_with_ok_status(client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(url=f"{BASE_URL}/manga/{MANGA_ID}", json=BURNING_ERROR_ENVELOPE)

    with pytest.raises(ApiError) as exc_info:
        await client.manga.get(MANGA_ID)

    assert exc_info.value.errors[0].status == 503


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status_code", "kwargs"),
    [
        (404, {"text": "<html>Not Found</html>"}),
        (500, {"json": {"message": "internal"}}),
        (502, {"content": b""}),
    ],
)
async def test_error_status_without_envelope(
    client: MangaloomClient, httpx_mock, status_code, kwargs
):
    httpx_mock.add_response(url=f"{BASE_URL}/manga/random", status_code=status_code, **kwargs)

    with pytest.raises(ApiError) as exc_info:
        await client.manga.random()

    assert exc_info.value.errors == []
    assert exc_info.value.status_code == status_code


@pytest.mark.asyncio
async def test_non_json_success_is_malformed(client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(url=f"{BASE_URL}/manga/random", text="surprise")

    with pytest.raises(MalformedResponseError) as exc_info:
        await client.manga.random()

    assert exc_info.value.response is not None


@pytest.mark.asyncio
async def test_unknown_result_tag_is_malformed(client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(url=f"{BASE_URL}/manga/random", json={"result": "meh"})

    with pytest.raises(MalformedResponseError):
        await client.manga.random()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("raised", "expected"),
    [
        (httpx.ReadTimeout("timed out"), TimeoutError),
        (httpx.ConnectError("connection refused"), NetworkError),
        (httpx.RemoteProtocolError("bad framing"), TransportError),
    ],
)
async def test_transport_failures_are_mapped(
    client: MangaloomClient, httpx_mock, raised, expected
):
    httpx_mock.add_exception(raised, url=f"{BASE_URL}/manga/random")

    with pytest.raises(expected) as exc_info:
        await client.manga.random()

    assert isinstance(exc_info.value, TransportError)
    assert isinstance(exc_info.value.__cause__, type(raised))
    assert exc_info.value.request is not None


@pytest.mark.asyncio
async def test_raw_shape_skips_envelope(client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(
        method="GET", json={"baseUrl": "https://uploads.mangadex.test"}
    )

    server = await client.misc.at_home_server(CHAPTER_ID, force_port_443=True)

    assert isinstance(server, AtHomeServer)
    assert server.baseUrl == "https://uploads.mangadex.test"
    request = httpx_mock.get_request()
    assert request.url.path == f"/at-home/server/{CHAPTER_ID}"
    assert request.url.params["forcePort443"] == "true"


@pytest.mark.asyncio
async def test_collection_shape(client: MangaloomClient, httpx_mock):
    tag = {
        "result": "ok",
        "data": {
            "id": "391b0423-d847-456f-aff0-8b0cfc03066b",
            "type": "tag",
            "attributes": {"name": {"en": "Action"}, "group": "genre", "version": 1},
        },
    }
    httpx_mock.add_response(url=f"{BASE_URL}/manga/tag", json=[tag, BURNING_ERROR_ENVELOPE])

    tags = await client.manga.tags()

    assert isinstance(tags[0], Ok)
    assert tags[0].value.data.attributes.name == {"en": "Action"}
    assert isinstance(tags[1], Err)


@pytest.mark.asyncio
async def test_ad_hoc_request(client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(url=f"{BASE_URL}/statistics/manga", json={"result": "ok", "statistics": {}})

    result = await client.request("GET", "/statistics/manga", shape=ResponseShape.SINGLE)

    assert result == {"statistics": {}}


@pytest.mark.asyncio
async def test_ping(client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(url=f"{BASE_URL}/ping", text="pong")

    assert await client.ping() is None


@pytest.mark.asyncio
async def test_ping_mismatch(client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(url=f"{BASE_URL}/ping", text="ping?")

    with pytest.raises(PingError):
        await client.ping()


@pytest.mark.asyncio
async def test_request_hooks(httpx_mock):
    calls = []

    def add_header(method, url, params, headers):
        headers["X-Trace"] = "abc"
        calls.append(("pre", method, url))

    def broken_hook(method, url, params, headers):
        raise RuntimeError("hook failure")

    def record_response(response, decoded, attempts):
        calls.append(("post", response.status_code, decoded, attempts))

    settings = ApiSettings(
        _env_file=None,
        base_url=BASE_URL,
        pre_request_hooks=[broken_hook, add_header],
        post_request_hooks=[record_response],
    )
    httpx_mock.add_response(url=f"{BASE_URL}/captcha/solve", json={"result": "ok"})

    async with MangaloomClient(settings) as client:
        await client.misc.solve_captcha("challenge")

    assert httpx_mock.get_request().headers["X-Trace"] == "abc"
    assert calls == [
        ("pre", "POST", f"{BASE_URL}/captcha/solve"),
        ("post", 200, None, 1),
    ]


@pytest.mark.asyncio
async def test_aclose_closes_owned_client(settings: ApiSettings):
    client = MangaloomClient(settings)
    await client.aclose()
    assert client._http_client.is_closed


@pytest.mark.asyncio
async def test_aclose_leaves_injected_client_open(settings: ApiSettings):
    http_client = httpx.AsyncClient()
    async with MangaloomClient(settings, http_client=http_client):
        pass
    assert not http_client.is_closed
    await http_client.aclose()


@pytest.mark.asyncio
async def test_requests_use_injected_client_defaults(settings: ApiSettings, httpx_mock):
    httpx_mock.add_response(method="GET", url=f"{BASE_URL}/manga/random", json=manga_envelope())
    http_client = httpx.AsyncClient(headers={"X-App": "reader"}, timeout=4.0)

    async with MangaloomClient(settings, http_client=http_client) as client:
        await client.manga.random()

    request = httpx_mock.get_request()
    assert request.headers["X-App"] == "reader"
    assert request.extensions["timeout"]["read"] == 4.0
    await http_client.aclose()
