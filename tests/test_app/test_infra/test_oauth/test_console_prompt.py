"""Testes do consentimento OAuth via terminal."""

from __future__ import annotations

import pytest

from app.infra.oauth.console_prompt import (
    ConsoleAuthorizationPrompt,
    extract_authorization_code,
)
from app.infra.oauth.pkce import build_authorization_request
from utils.errors import AuthorizationDeniedError


def _auth_request():
    return build_authorization_request(
        endpoint="https://accounts.google.com/o/oauth2/v2/auth",
        client_id="client-1",
        scope="https://www.googleapis.com/auth/calendar.readonly",
        redirect_uri="http://127.0.0.1:8765/oauth2callback",
    )


@pytest.mark.asyncio
async def test_request_code_shows_url_and_returns_raw_code() -> None:
    auth_request = _auth_request()
    printed: list[str] = []
    prompt = ConsoleAuthorizationPrompt(
        input_func=lambda _: "  4/0Ab-code  ",
        output_func=printed.append,
    )

    code = await prompt.request_code(auth_request)

    assert code == "4/0Ab-code"
    assert auth_request.to_url() in printed[0]


def test_extract_code_from_redirect_url_checks_state() -> None:
    url = "http://127.0.0.1:8765/oauth2callback?state=s-1&code=abc&scope=x"

    assert extract_authorization_code(url, expected_state="s-1") == "abc"
    with pytest.raises(AuthorizationDeniedError, match="State mismatch"):
        extract_authorization_code(url, expected_state="other")


@pytest.mark.parametrize(
    ("answer", "message"),
    [
        ("", "Authorization cancelled"),
        ("http://127.0.0.1:8765/oauth2callback?error=access_denied&state=s-1", "access_denied"),
        ("http://127.0.0.1:8765/oauth2callback?state=s-1", "Missing authorization code"),
    ],
)
def test_extract_code_rejects_invalid_answers(answer: str, message: str) -> None:
    with pytest.raises(AuthorizationDeniedError, match=message):
        extract_authorization_code(answer, expected_state="s-1")
