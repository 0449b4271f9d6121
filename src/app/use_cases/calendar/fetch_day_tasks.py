"""Use case: autorizar e gerar as tasks de work-log de um dia."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.observability import correlation_scope, record_latency

if TYPE_CHECKING:
    from datetime import date, datetime

    from app.domain.worklog import Task
    from app.protocols.calendar_service import (
        CalendarAuthorizerProtocol,
        CalendarServiceProtocol,
    )

logger = logging.getLogger(__name__)

_COMPONENT = "fetch_day_tasks"


class FetchDayTasksUseCase:
    """Orquestra authorize() seguido de fetch_events() para uma data.

    Erros de autorização ou de leitura propagam sem retry; não há
    resultado parcial.
    """

    def __init__(
        self,
        authorizer: CalendarAuthorizerProtocol,
        calendar: CalendarServiceProtocol,
    ) -> None:
        self._authorizer = authorizer
        self._calendar = calendar

    async def execute(
        self,
        day: date | datetime,
        default_project: str | None = None,
    ) -> list[Task]:
        with correlation_scope() as correlation_id:
            started = time.perf_counter()
            await self._authorizer.authorize()
            tasks = await self._calendar.fetch_events(day, default_project)
            record_latency(
                _COMPONENT,
                "execute",
                (time.perf_counter() - started) * 1000,
                correlation_id,
            )
            logger.info(
                "day_tasks_fetched",
                extra={
                    "component": _COMPONENT,
                    "result": "ok",
                    "task_count": len(tasks),
                    "manhours_total": sum(task.manhours for task in tasks),
                    "correlation_id": correlation_id,
                },
            )
            return tasks
