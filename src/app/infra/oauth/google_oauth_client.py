"""Client OAuth2 (authorization code + PKCE) para contas Google.

Obtém e renova o access token usado pelo client de calendário. O
armazenamento dos tokens é delegado ao token cache injetado.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.domain.oauth import TokenSet
from app.infra.http import HttpClient, HttpClientConfig, status_text
from app.infra.oauth.pkce import build_authorization_request
from app.observability import get_correlation_id
from app.protocols.calendar_service import CalendarAuthorizerProtocol
from config.logging import log_http_failure
from utils.errors import (
    GoogleConfigurationError,
    TokenExchangeError,
    TokenRefreshError,
)

if TYPE_CHECKING:
    import httpx

    from app.domain.oauth import AuthorizationRequest
    from app.protocols.authorization_prompt import AuthorizationPromptProtocol
    from app.protocols.token_cache import TokenCacheProtocol
    from utils.errors import GoogleIntegrationError

logger = logging.getLogger(__name__)

_COMPONENT = "google_oauth_client"

GOOGLE_AUTHORIZATION_ENDPOINT = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_ENDPOINT = "https://oauth2.googleapis.com/token"
CALENDAR_READONLY_SCOPE = "https://www.googleapis.com/auth/calendar.readonly"


class GoogleOAuthClient(CalendarAuthorizerProtocol):
    """Mantem um access token utilizável no token cache.

    Chamadas concorrentes de authorize() na mesma instância são serializadas,
    evitando dois refreshes ou dois consentimentos simultaneos.
    """

    def __init__(
        self,
        *,
        client_id: str,
        token_cache: TokenCacheProtocol,
        prompt: AuthorizationPromptProtocol,
        redirect_uri: str,
        http_client: HttpClient | None = None,
        scope: str = CALENDAR_READONLY_SCOPE,
    ) -> None:
        self._client_id = client_id
        self._token_cache = token_cache
        self._prompt = prompt
        self._redirect_uri = redirect_uri
        self._http = http_client or HttpClient(HttpClientConfig())
        self._scope = scope
        self._lock = asyncio.Lock()

    async def authorize(self) -> None:
        if not self._client_id:
            logger.info(
                "google_oauth_skipped",
                extra=self._extra(action="authorize", result="not_configured"),
            )
            return
        async with self._lock:
            await self._authorize_locked()

    async def _authorize_locked(self) -> None:
        tokens = await self._token_cache.get_tokens()
        if tokens is not None and tokens.access_token:
            if tokens.refresh_token and tokens.is_expired():
                await self._token_cache.set_tokens(
                    await self.refresh_tokens(tokens.refresh_token)
                )
                logger.info(
                    "google_oauth_tokens_refreshed",
                    extra=self._extra(action="authorize", result="refreshed"),
                )
            return

        auth_request = build_authorization_request(
            endpoint=GOOGLE_AUTHORIZATION_ENDPOINT,
            client_id=self._client_id,
            scope=self._scope,
            redirect_uri=self._redirect_uri,
        )
        authorization_code = await self._prompt.request_code(auth_request)
        await self._token_cache.set_tokens(
            await self.fetch_tokens(auth_request, authorization_code)
        )
        logger.info(
            "google_oauth_authorized",
            extra=self._extra(action="authorize", result="authorized"),
        )

    async def fetch_tokens(
        self,
        auth_request: AuthorizationRequest,
        authorization_code: str,
    ) -> TokenSet:
        """Troca o authorization code (com o verifier PKCE) por tokens."""
        if not self._client_id:
            raise GoogleConfigurationError("No Client ID provided")
        response = await self._http.post_form(
            GOOGLE_TOKEN_ENDPOINT,
            {
                "client_id": self._client_id,
                "code": authorization_code,
                "code_verifier": auth_request.code_verifier,
                "grant_type": "authorization_code",
                "redirect_uri": auth_request.redirect_uri,
            },
        )
        payload = self._read_token_response(
            response,
            action="fetch_tokens",
            error_cls=TokenExchangeError,
        )
        return TokenSet.from_token_response(payload)

    async def refresh_tokens(self, refresh_token: str) -> TokenSet:
        """Renova os tokens; o refresh_token antigo é mantido se o Google não rotacionar."""
        if not self._client_id:
            raise GoogleConfigurationError("No Client ID provided")
        response = await self._http.post_form(
            GOOGLE_TOKEN_ENDPOINT,
            {
                "client_id": self._client_id,
                "refresh_token": refresh_token,
                "grant_type": "refresh_token",
            },
        )
        payload = self._read_token_response(
            response,
            action="refresh_tokens",
            error_cls=TokenRefreshError,
        )
        payload["refresh_token"] = payload.get("refresh_token") or refresh_token
        return TokenSet.from_token_response(payload)

    def _read_token_response(
        self,
        response: httpx.Response,
        *,
        action: str,
        error_cls: type[GoogleIntegrationError],
    ) -> dict[str, Any]:
        if not response.is_success:
            log_http_failure(
                logger,
                "google_oauth_token_error",
                component=_COMPONENT,
                action=action,
                status_code=response.status_code,
                response_text=response.text,
                correlation_id=get_correlation_id(),
            )
            raise error_cls(status_text(response), status_code=response.status_code)
        return dict(response.json())

    def _extra(self, *, action: str, result: str) -> dict[str, str]:
        return {
            "component": _COMPONENT,
            "action": action,
            "result": result,
            "correlation_id": get_correlation_id(),
        }
