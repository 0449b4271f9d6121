"""Fakes in-memory de autorização e calendário para testes do use case."""

from __future__ import annotations

from datetime import date, datetime

from app.domain.worklog import Task


class FakeAuthorizer:
    def __init__(self, calls: list[str] | None = None) -> None:
        self.calls = calls if calls is not None else []

    async def authorize(self) -> None:
        self.calls.append("authorize")


class FakeCalendarService:
    """Devolve tasks predefinidas e registra a ordem das chamadas."""

    def __init__(self, tasks: list[Task], calls: list[str] | None = None) -> None:
        self._tasks = tasks
        self.calls = calls if calls is not None else []
        self.requests: list[tuple[date | datetime, str | None]] = []

    async def fetch_events(
        self,
        day: date | datetime,
        default_project: str | None = None,
    ) -> list[Task]:
        self.calls.append("fetch_events")
        self.requests.append((day, default_project))
        return [task.model_copy() for task in self._tasks]
