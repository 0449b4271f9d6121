"""Geração dos parâmetros PKCE (RFC 7636, método S256)."""

from __future__ import annotations

import base64
import hashlib
import secrets

from app.domain.oauth import AuthorizationRequest

# token_urlsafe(64) gera 86 caracteres, dentro da faixa 43-128 da RFC
_VERIFIER_BYTES = 64
_STATE_BYTES = 16


def generate_code_verifier() -> str:
    return secrets.token_urlsafe(_VERIFIER_BYTES)


def code_challenge_for(code_verifier: str) -> str:
    """SHA-256 do verifier em base64url sem padding."""
    digest = hashlib.sha256(code_verifier.encode("ascii")).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


def build_authorization_request(
    *,
    endpoint: str,
    client_id: str,
    scope: str,
    redirect_uri: str,
) -> AuthorizationRequest:
    """Cria um AuthorizationRequest novo, com verifier e state aleatórios."""
    code_verifier = generate_code_verifier()
    return AuthorizationRequest(
        endpoint=endpoint,
        client_id=client_id,
        scope=scope,
        redirect_uri=redirect_uri,
        code_verifier=code_verifier,
        code_challenge=code_challenge_for(code_verifier),
        state=secrets.token_urlsafe(_STATE_BYTES),
    )
