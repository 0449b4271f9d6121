"""Factories dos clients de calendário a partir das settings.

Nenhum client e singleton: cada chamada constroi objetos novos com o
token cache e o prompt injetados pelo host.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.calendar.google_calendar_client import GoogleCalendarClient
from app.infra.http import HttpClient, HttpClientConfig
from app.infra.oauth.console_prompt import ConsoleAuthorizationPrompt
from app.infra.oauth.google_oauth_client import GoogleOAuthClient
from app.use_cases.calendar import FetchDayTasksUseCase
from config.settings import get_calendar_settings

if TYPE_CHECKING:
    import httpx

    from app.protocols.authorization_prompt import AuthorizationPromptProtocol
    from app.protocols.token_cache import TokenCacheProtocol
    from config.settings import CalendarSettings

logger = logging.getLogger(__name__)


def create_oauth_client(
    token_cache: TokenCacheProtocol,
    prompt: AuthorizationPromptProtocol | None = None,
    settings: CalendarSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> GoogleOAuthClient:
    """Cria o client OAuth.

    Args:
        token_cache: Armazenamento seguro fornecido pelo host.
        prompt: Consentimento interativo; default é o prompt de terminal.
        settings: CalendarSettings; se None, carrega do ambiente.
        transport: Transport httpx opcional (testes).
    """
    calendar = settings or get_calendar_settings()
    http_client = HttpClient(
        HttpClientConfig(timeout_seconds=calendar.request_timeout_seconds),
        transport=transport,
    )
    return GoogleOAuthClient(
        client_id=calendar.google_client_id,
        token_cache=token_cache,
        prompt=prompt or ConsoleAuthorizationPrompt(),
        redirect_uri=calendar.oauth_redirect_uri,
        http_client=http_client,
    )


def create_calendar_client(
    token_cache: TokenCacheProtocol,
    settings: CalendarSettings | None = None,
) -> GoogleCalendarClient:
    calendar = settings or get_calendar_settings()
    return GoogleCalendarClient(
        client_id=calendar.google_client_id,
        account_id=calendar.google_account_id,
        token_cache=token_cache,
        default_project=calendar.default_project,
        timeout_seconds=calendar.request_timeout_seconds,
        timezone=calendar.calendar_timezone,
    )


def create_fetch_day_tasks(
    token_cache: TokenCacheProtocol,
    prompt: AuthorizationPromptProtocol | None = None,
    settings: CalendarSettings | None = None,
) -> FetchDayTasksUseCase:
    """Monta o use case completo compartilhando o mesmo token cache."""
    calendar = settings or get_calendar_settings()
    if not calendar.is_configured:
        logger.info(
            "calendar_not_configured",
            extra={"component": "bootstrap", "result": "degraded"},
        )
    return FetchDayTasksUseCase(
        authorizer=create_oauth_client(token_cache, prompt, calendar),
        calendar=create_calendar_client(token_cache, calendar),
    )
