"""Modelos de domínio do fluxo OAuth2 com PKCE.

O TokenSet é persistido exclusivamente pelo token cache externo; aqui só
definimos o formato trocado com ele.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TokenSet(BaseModel):
    """Tokens OAuth armazenados no token cache."""

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., min_length=1, description="Bearer token de acesso.")
    refresh_token: str | None = Field(default=None, description="Token de renovação.")
    id_token: str | None = Field(default=None, description="ID token OpenID, se emitido.")
    scope: str | None = Field(default=None, description="Escopos concedidos.")
    expires_in: int | None = Field(
        default=None,
        ge=0,
        description="Validade em segundos a partir de updated_at.",
    )
    updated_at: datetime = Field(
        default_factory=_utc_now,
        description="Momento em que os tokens foram recebidos.",
    )

    @classmethod
    def from_token_response(cls, payload: dict[str, Any]) -> TokenSet:
        """Constroi a partir do JSON do token endpoint (campos snake_case)."""
        return cls.model_validate(payload)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Tokens sem expires_in nunca expiram."""
        if self.expires_in is None:
            return False
        current = now or _utc_now()
        return self.updated_at + timedelta(seconds=self.expires_in) <= current


class AuthorizationRequest(BaseModel):
    """Parâmetros PKCE efemeros de uma chamada de authorize()."""

    model_config = ConfigDict(frozen=True)

    endpoint: str
    client_id: str
    scope: str
    redirect_uri: str
    code_verifier: str
    code_challenge: str
    state: str

    def to_url(self) -> str:
        """URL de consentimento a ser aberta pelo usuário."""
        query = urlencode(
            {
                "client_id": self.client_id,
                "response_type": "code",
                "redirect_uri": self.redirect_uri,
                "scope": self.scope,
                "state": self.state,
                "code_challenge": self.code_challenge,
                "code_challenge_method": "S256",
                "access_type": "offline",
            }
        )
        return f"{self.endpoint}?{query}"


__all__ = ["AuthorizationRequest", "TokenSet"]
