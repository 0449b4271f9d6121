"""Testes unitários para o client OAuth PKCE do Google."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from urllib.parse import parse_qs

import httpx
import pytest

from app.domain.oauth import TokenSet
from app.infra.http import HttpClient
from app.infra.oauth.google_oauth_client import (
    CALENDAR_READONLY_SCOPE,
    GOOGLE_AUTHORIZATION_ENDPOINT,
    GOOGLE_TOKEN_ENDPOINT,
    GoogleOAuthClient,
)
from app.infra.oauth.pkce import build_authorization_request
from tests.fakes.fake_authorization_prompt import FakeAuthorizationPrompt
from tests.fakes.fake_token_cache import FakeTokenCache
from utils.errors import GoogleConfigurationError, TokenExchangeError, TokenRefreshError


class _Recorder:
    """Handler de MockTransport que guarda cada request recebido."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    def form(self, index: int = 0) -> dict[str, str]:
        body = parse_qs(self.requests[index].content.decode())
        return {key: values[0] for key, values in body.items()}


def _build_client(
    recorder: _Recorder,
    cache: FakeTokenCache,
    *,
    client_id: str = "client-1",
    prompt: FakeAuthorizationPrompt | None = None,
) -> GoogleOAuthClient:
    return GoogleOAuthClient(
        client_id=client_id,
        token_cache=cache,
        prompt=prompt or FakeAuthorizationPrompt(),
        redirect_uri="http://127.0.0.1:8765/oauth2callback",
        http_client=HttpClient(transport=httpx.MockTransport(recorder)),
    )


def _expired_tokens(refresh_token: str | None = "refresh-old") -> TokenSet:
    return TokenSet(
        access_token="access-old",
        refresh_token=refresh_token,
        expires_in=3600,
        updated_at=datetime.now(UTC) - timedelta(hours=2),
    )


@pytest.mark.asyncio
async def test_authorize_with_valid_token_makes_no_request() -> None:
    recorder = _Recorder(httpx.Response(500))
    cache = FakeTokenCache(TokenSet(access_token="access-1", refresh_token="r", expires_in=3600))
    prompt = FakeAuthorizationPrompt()
    client = _build_client(recorder, cache, prompt=prompt)

    await client.authorize()

    assert recorder.requests == []
    assert prompt.requests == []
    assert cache.stored == []


@pytest.mark.asyncio
async def test_authorize_refreshes_expired_token_with_single_request() -> None:
    recorder = _Recorder(
        httpx.Response(200, json={"access_token": "access-new", "expires_in": 3599})
    )
    cache = FakeTokenCache(_expired_tokens())
    prompt = FakeAuthorizationPrompt()
    client = _build_client(recorder, cache, prompt=prompt)

    await client.authorize()

    assert len(recorder.requests) == 1
    assert str(recorder.requests[0].url) == GOOGLE_TOKEN_ENDPOINT
    assert recorder.form() == {
        "client_id": "client-1",
        "refresh_token": "refresh-old",
        "grant_type": "refresh_token",
    }
    assert prompt.requests == []
    assert cache.tokens is not None
    assert cache.tokens.access_token == "access-new"
    assert cache.tokens.refresh_token == "refresh-old"


@pytest.mark.asyncio
async def test_authorize_expired_token_without_refresh_token_is_kept() -> None:
    recorder = _Recorder(httpx.Response(500))
    cache = FakeTokenCache(_expired_tokens(refresh_token=None))
    client = _build_client(recorder, cache)

    await client.authorize()

    assert recorder.requests == []
    assert cache.stored == []


@pytest.mark.asyncio
async def test_authorize_without_tokens_runs_full_code_exchange() -> None:
    recorder = _Recorder(
        httpx.Response(
            200,
            json={
                "access_token": "access-1",
                "refresh_token": "refresh-1",
                "expires_in": 3599,
                "scope": CALENDAR_READONLY_SCOPE,
                "token_type": "Bearer",
            },
        )
    )
    cache = FakeTokenCache()
    prompt = FakeAuthorizationPrompt(code="code-xyz")
    client = _build_client(recorder, cache, prompt=prompt)

    await client.authorize()

    assert len(prompt.requests) == 1
    auth_request = prompt.requests[0]
    assert auth_request.endpoint == GOOGLE_AUTHORIZATION_ENDPOINT
    assert auth_request.client_id == "client-1"
    assert auth_request.scope == CALENDAR_READONLY_SCOPE
    assert len(recorder.requests) == 1
    assert recorder.form() == {
        "client_id": "client-1",
        "code": "code-xyz",
        "code_verifier": auth_request.code_verifier,
        "grant_type": "authorization_code",
        "redirect_uri": "http://127.0.0.1:8765/oauth2callback",
    }
    assert len(cache.stored) == 1
    assert cache.stored[0].access_token == "access-1"
    assert cache.stored[0].refresh_token == "refresh-1"


@pytest.mark.asyncio
async def test_authorize_without_client_id_is_noop() -> None:
    recorder = _Recorder(httpx.Response(500))
    cache = FakeTokenCache()
    prompt = FakeAuthorizationPrompt()
    client = _build_client(recorder, cache, client_id="", prompt=prompt)

    await client.authorize()

    assert recorder.requests == []
    assert prompt.requests == []


@pytest.mark.asyncio
async def test_refresh_tokens_keeps_rotated_refresh_token() -> None:
    recorder = _Recorder(
        httpx.Response(200, json={"access_token": "a2", "refresh_token": "r2", "expires_in": 10})
    )
    client = _build_client(recorder, FakeTokenCache())

    tokens = await client.refresh_tokens("r1")

    assert tokens.refresh_token == "r2"


@pytest.mark.asyncio
async def test_refresh_tokens_raises_with_status_text() -> None:
    recorder = _Recorder(httpx.Response(400, json={"error": "invalid_grant"}))
    client = _build_client(recorder, FakeTokenCache())

    with pytest.raises(TokenRefreshError, match="Bad Request") as exc_info:
        await client.refresh_tokens("r1")

    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_fetch_tokens_raises_with_status_text() -> None:
    recorder = _Recorder(httpx.Response(401, text="unauthorized_client"))
    client = _build_client(recorder, FakeTokenCache())
    auth_request = build_authorization_request(
        endpoint=GOOGLE_AUTHORIZATION_ENDPOINT,
        client_id="client-1",
        scope=CALENDAR_READONLY_SCOPE,
        redirect_uri="http://127.0.0.1:8765/oauth2callback",
    )

    with pytest.raises(TokenExchangeError, match="Unauthorized"):
        await client.fetch_tokens(auth_request, "code")


@pytest.mark.asyncio
async def test_authorize_propagates_refresh_failure_without_storing() -> None:
    recorder = _Recorder(httpx.Response(400))
    cache = FakeTokenCache(_expired_tokens())
    client = _build_client(recorder, cache)

    with pytest.raises(TokenRefreshError):
        await client.authorize()

    assert cache.stored == []


@pytest.mark.asyncio
async def test_token_calls_without_client_id_raise_configuration_error() -> None:
    client = _build_client(_Recorder(httpx.Response(200)), FakeTokenCache(), client_id="")

    with pytest.raises(GoogleConfigurationError):
        await client.refresh_tokens("r1")
