"""Testes da geração de parâmetros PKCE."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

from app.infra.oauth.google_oauth_client import (
    CALENDAR_READONLY_SCOPE,
    GOOGLE_AUTHORIZATION_ENDPOINT,
)
from app.infra.oauth.pkce import build_authorization_request, code_challenge_for


def test_code_challenge_matches_rfc7636_example() -> None:
    # Exemplo do apendice B da RFC 7636
    verifier = "dBjftJeZ4CVP-mJ92IZNuwBdC4AfBHpCpBJDgo3zfGw"
    assert code_challenge_for(verifier) == "E9Melhoa2OwvFrEMTJguCHaoeK1t8URWbuGJSstw-cM"


def test_build_authorization_request_is_fresh_per_call() -> None:
    first = build_authorization_request(
        endpoint=GOOGLE_AUTHORIZATION_ENDPOINT,
        client_id="client-1",
        scope=CALENDAR_READONLY_SCOPE,
        redirect_uri="http://127.0.0.1:8765/oauth2callback",
    )
    second = build_authorization_request(
        endpoint=GOOGLE_AUTHORIZATION_ENDPOINT,
        client_id="client-1",
        scope=CALENDAR_READONLY_SCOPE,
        redirect_uri="http://127.0.0.1:8765/oauth2callback",
    )

    assert first.code_verifier != second.code_verifier
    assert first.state != second.state
    assert 43 <= len(first.code_verifier) <= 128
    assert first.code_challenge == code_challenge_for(first.code_verifier)


def test_authorization_url_carries_pkce_parameters() -> None:
    auth_request = build_authorization_request(
        endpoint=GOOGLE_AUTHORIZATION_ENDPOINT,
        client_id="client-1",
        scope=CALENDAR_READONLY_SCOPE,
        redirect_uri="http://127.0.0.1:8765/oauth2callback",
    )

    parts = urlsplit(auth_request.to_url())
    query = {key: values[0] for key, values in parse_qs(parts.query).items()}

    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == GOOGLE_AUTHORIZATION_ENDPOINT
    assert query["response_type"] == "code"
    assert query["code_challenge_method"] == "S256"
    assert query["code_challenge"] == auth_request.code_challenge
    assert query["scope"] == CALENDAR_READONLY_SCOPE
    assert query["state"] == auth_request.state
    assert "code_verifier" not in query
