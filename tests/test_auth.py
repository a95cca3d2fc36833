"""Tests for the credential lifecycle and the token store."""

import asyncio
import json

import httpx
import pytest

from conftest import BASE_URL, BURNING_ERROR_ENVELOPE
from mangaloom.auth import SessionTokenAuth, TokenStore
from mangaloom.client import MangaloomClient
from mangaloom.config import ApiSettings
from mangaloom.exceptions import (
    ApiError,
    ConfigurationError,
    MissingCredentialsError,
    NetworkError,
)
from mangaloom.models.auth import AuthTokens

LOGIN_OK = {
    "result": "ok",
    "token": {"session": "sessiontoken", "refresh": "refreshtoken"},
}
REFRESH_OK = {
    "result": "ok",
    "token": {"session": "sessiontoken2", "refresh": "refreshtoken2"},
    "message": "Token refreshed!",
}


@pytest.mark.asyncio
async def test_login_stores_tokens(client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(method="POST", url=f"{BASE_URL}/auth/login", json=LOGIN_OK)

    tokens = await client.login("reader", "hunter22hunter22")

    assert tokens == AuthTokens(session="sessiontoken", refresh="refreshtoken")
    assert client.tokens == tokens
    request = httpx_mock.get_request()
    assert json.loads(request.content) == {
        "username": "reader",
        "password": "hunter22hunter22",
    }
    assert "Authorization" not in request.headers


@pytest.mark.asyncio
async def test_login_uses_settings_credentials(httpx_mock):
    settings = ApiSettings(
        _env_file=None, base_url=BASE_URL, username="reader", password="from-settings"
    )
    httpx_mock.add_response(method="POST", url=f"{BASE_URL}/auth/login", json=LOGIN_OK)

    async with MangaloomClient(settings) as client:
        await client.login()

    assert json.loads(httpx_mock.get_request().content)["password"] == "from-settings"


@pytest.mark.asyncio
async def test_login_without_credentials(client: MangaloomClient, httpx_mock):
    with pytest.raises(ConfigurationError):
        await client.login()
    assert httpx_mock.get_requests() == []


@pytest.mark.asyncio
async def test_login_failure_keeps_previous_tokens(
    authed_client: MangaloomClient, tokens: AuthTokens, httpx_mock
):
    httpx_mock.add_response(
        method="POST",
        url=f"{BASE_URL}/auth/login",
        status_code=401,
        json={
            "result": "error",
            "errors": [
                {
                    "id": "5e50fc7b-e185-45b1-a692-58e8091b22d2",
                    "status": 401,
                    "title": "unauthorized_http_exception",
                    "detail": "User / Password does not match",
                }
            ],
        },
    )

    with pytest.raises(ApiError) as exc_info:
        await authed_client.login("reader", "wrong-password")

    assert exc_info.value.status_code == 401
    assert authed_client.tokens == tokens


@pytest.mark.asyncio
async def test_login_then_logout_clears_tokens(client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(method="POST", url=f"{BASE_URL}/auth/login", json=LOGIN_OK)
    httpx_mock.add_response(method="POST", url=f"{BASE_URL}/auth/logout", json={"result": "ok"})

    await client.login("reader", "hunter22hunter22")
    await client.logout()

    assert client.tokens is None
    logout_request = httpx_mock.get_requests()[-1]
    assert logout_request.headers["Authorization"] == "Bearer sessiontoken"


@pytest.mark.asyncio
async def test_logout_without_tokens_sends_nothing(client: MangaloomClient, httpx_mock):
    with pytest.raises(MissingCredentialsError):
        await client.logout()
    assert httpx_mock.get_requests() == []


@pytest.mark.asyncio
async def test_logout_failure_keeps_tokens(
    authed_client: MangaloomClient, tokens: AuthTokens, httpx_mock
):
    """A failed remote logout leaves the stored pair as it was."""
    httpx_mock.add_response(
        method="POST",
        url=f"{BASE_URL}/auth/logout",
        status_code=503,
        json=BURNING_ERROR_ENVELOPE,
    )

    with pytest.raises(ApiError) as exc_info:
        await authed_client.logout()

    assert len(exc_info.value.errors) == 1
    assert exc_info.value.errors[0].title == "The service is unavailable"
    assert authed_client.tokens == tokens


@pytest.mark.asyncio
async def test_logout_transport_failure_keeps_tokens(
    authed_client: MangaloomClient, tokens: AuthTokens, httpx_mock
):
    httpx_mock.add_exception(httpx.ConnectError("down"), url=f"{BASE_URL}/auth/logout")

    with pytest.raises(NetworkError):
        await authed_client.logout()

    assert authed_client.tokens == tokens


@pytest.mark.asyncio
async def test_refresh_replaces_both_tokens(authed_client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(method="POST", url=f"{BASE_URL}/auth/refresh", json=REFRESH_OK)

    result = await authed_client.refresh()

    assert result.message == "Token refreshed!"
    assert authed_client.tokens == AuthTokens(
        session="sessiontoken2", refresh="refreshtoken2"
    )
    assert json.loads(httpx_mock.get_request().content) == {"token": "refreshtoken"}


@pytest.mark.asyncio
async def test_refresh_without_tokens_sends_nothing(client: MangaloomClient, httpx_mock):
    with pytest.raises(MissingCredentialsError):
        await client.refresh()
    assert httpx_mock.get_requests() == []


@pytest.mark.asyncio
async def test_refresh_failure_keeps_tokens(
    authed_client: MangaloomClient, tokens: AuthTokens, httpx_mock
):
    httpx_mock.add_response(
        method="POST", url=f"{BASE_URL}/auth/refresh", status_code=503, json=BURNING_ERROR_ENVELOPE
    )

    with pytest.raises(ApiError):
        await authed_client.refresh()

    assert authed_client.tokens == tokens


@pytest.mark.asyncio
async def test_lifecycle_operations_are_serialized(authed_client: MangaloomClient, httpx_mock):
    """A logout queued behind a refresh uses the refreshed session token."""
    httpx_mock.add_response(method="POST", url=f"{BASE_URL}/auth/refresh", json=REFRESH_OK)
    httpx_mock.add_response(method="POST", url=f"{BASE_URL}/auth/logout", json={"result": "ok"})

    await asyncio.gather(authed_client.refresh(), authed_client.logout())

    refresh_request, logout_request = httpx_mock.get_requests()
    assert refresh_request.url.path == "/auth/refresh"
    assert logout_request.headers["Authorization"] == "Bearer sessiontoken2"
    assert authed_client.tokens is None


@pytest.mark.asyncio
async def test_set_tokens(client: MangaloomClient, tokens: AuthTokens):
    await client.set_tokens(tokens)
    assert client.tokens == tokens

    await client.set_tokens(None)
    assert client.tokens is None


@pytest.mark.asyncio
async def test_check_token(authed_client: MangaloomClient, httpx_mock):
    httpx_mock.add_response(
        method="GET",
        url=f"{BASE_URL}/auth/check",
        json={
            "result": "ok",
            "isAuthenticated": True,
            "roles": ["ROLE_MEMBER"],
            "permissions": ["manga.view"],
        },
    )

    check = await authed_client.check_token()

    assert check.isAuthenticated is True
    assert check.roles == ["ROLE_MEMBER"]


@pytest.mark.asyncio
async def test_check_token_requires_session(client: MangaloomClient, httpx_mock):
    with pytest.raises(MissingCredentialsError):
        await client.check_token()
    assert httpx_mock.get_requests() == []


@pytest.mark.asyncio
async def test_session_token_auth_attaches_bearer(tokens: AuthTokens):
    auth = SessionTokenAuth(TokenStore(tokens))
    request = httpx.Request("GET", f"{BASE_URL}/manga")

    await auth.async_authenticate(request)

    assert request.headers["Authorization"] == "Bearer sessiontoken"


@pytest.mark.asyncio
async def test_session_token_auth_without_token():
    auth = SessionTokenAuth(TokenStore())
    request = httpx.Request("GET", f"{BASE_URL}/manga")

    await auth.async_authenticate(request)
    assert "Authorization" not in request.headers

    with pytest.raises(MissingCredentialsError):
        await auth.async_authenticate(request, requires_auth=True)


def test_tokens_are_masked_in_repr(tokens: AuthTokens):
    assert "sessiontoken" not in repr(tokens)
    assert "refreshtoken" not in repr(TokenStore(tokens))
    assert repr(TokenStore()) == "TokenStore(empty)"
