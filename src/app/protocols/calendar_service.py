"""Contratos de autorização e leitura de calendário.

Mantemos apenas os protocolos aqui para permitir troca de provider sem
impactar o caso de uso de work-log.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import date, datetime

    from app.domain.worklog import Task


@runtime_checkable
class CalendarAuthorizerProtocol(Protocol):
    """Garante um access token utilizável no token cache."""

    async def authorize(self) -> None:
        """Idempotente: no-op quando já existe token válido."""
        ...


@runtime_checkable
class CalendarServiceProtocol(Protocol):
    """Leitura dos eventos de um dia convertidos em tasks."""

    async def fetch_events(
        self,
        day: date | datetime,
        default_project: str | None = None,
    ) -> list[Task]:
        """Retorna as tasks do dia UTC na ordem do provider."""
        ...
