"""Client concreto de Google Calendar para geração de tasks de work-log."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

import httplib2
from google.oauth2.credentials import Credentials
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.infra.calendar.google_calendar_parsers import (
    http_error_body,
    http_status,
    http_status_text,
    map_event_to_task,
    utc_day_window,
)
from app.observability import get_correlation_id, record_task_count
from app.protocols.calendar_service import CalendarServiceProtocol
from app.services.task_rules import DEFAULT_TASK_RULES
from config.logging import log_http_failure
from utils.errors import CalendarFetchError

if TYPE_CHECKING:
    from datetime import date, datetime

    from app.domain.worklog import Task
    from app.protocols.token_cache import TokenCacheProtocol
    from app.services.task_rules import TaskRules

logger = logging.getLogger(__name__)

_COMPONENT = "google_calendar_client"


class GoogleCalendarClient(CalendarServiceProtocol):
    """Lê os eventos de um dia da API v3 e converte cada um em Task."""

    __slots__ = (
        "_account_id",
        "_client_id",
        "_default_project",
        "_rules",
        "_timeout_seconds",
        "_token_cache",
        "_zone",
    )

    def __init__(
        self,
        *,
        client_id: str,
        account_id: str,
        token_cache: TokenCacheProtocol,
        default_project: str = "108",
        timeout_seconds: float = 30.0,
        timezone: str | None = None,
        rules: TaskRules = DEFAULT_TASK_RULES,
    ) -> None:
        self._client_id = client_id
        self._account_id = account_id
        self._token_cache = token_cache
        self._default_project = default_project
        self._timeout_seconds = timeout_seconds
        self._zone = ZoneInfo(timezone) if timezone else None
        self._rules = rules

    async def fetch_events(
        self,
        day: date | datetime,
        default_project: str | None = None,
    ) -> list[Task]:
        if not self._client_id or not self._account_id:
            logger.info(
                "google_calendar_skipped",
                extra=self._extra(action="fetch_events", result="not_configured"),
            )
            return []

        time_min, time_max = utc_day_window(day)
        tokens = await self._token_cache.get_tokens()
        access_token = tokens.access_token if tokens is not None else ""
        try:
            response = await asyncio.to_thread(
                self._list_events_sync, access_token, time_min, time_max
            )
        except HttpError as exc:
            await self._handle_http_error(exc)
            raise CalendarFetchError(
                http_status_text(exc), status_code=http_status(exc)
            ) from exc

        project = default_project if default_project is not None else self._default_project
        items = response.get("items") or []
        tasks = [
            map_event_to_task(item, project, rules=self._rules, zone=self._zone)
            for item in items
        ]
        kept = [task for task in tasks if not self._rules.is_excluded(task.task)]
        record_task_count(_COMPONENT, len(tasks), len(kept), get_correlation_id())
        return kept

    async def _handle_http_error(self, exc: HttpError) -> None:
        if http_status(exc) == 401:
            logger.info(
                "google_calendar_clearing_tokens",
                extra=self._extra(action="fetch_events", result="unauthorized"),
            )
            await self._token_cache.remove_tokens()
        log_http_failure(
            logger,
            "google_calendar_http_error",
            component=_COMPONENT,
            action="fetch_events",
            status_code=http_status(exc),
            response_text=http_error_body(exc),
            correlation_id=get_correlation_id(),
        )

    def _list_events_sync(
        self,
        access_token: str,
        time_min: str,
        time_max: str,
    ) -> dict[str, Any]:
        http = AuthorizedHttp(
            Credentials(token=access_token),
            http=httplib2.Http(timeout=self._timeout_seconds),
            # 401 precisa chegar como HttpError para limpar o token cache
            refresh_status_codes=(),
        )
        service = build("calendar", "v3", http=http, cache_discovery=False)
        return service.events().list(
            calendarId=self._account_id,
            singleEvents=True,
            orderBy="startTime",
            timeMin=time_min,
            timeMax=time_max,
        ).execute()

    def _extra(self, *, action: str, result: str) -> dict[str, str]:
        return {
            "component": _COMPONENT,
            "action": action,
            "result": result,
            "correlation_id": get_correlation_id(),
        }
