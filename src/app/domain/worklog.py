"""Modelo de task de work-log gerada a partir de eventos de calendário."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _new_task_id() -> str:
    return str(uuid4())


class Task(BaseModel):
    """Registro de horas derivado de um evento.

    O id é gerado a cada fetch; tasks não são deduplicadas entre chamadas.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(default_factory=_new_task_id, description="UUID4 da task.")
    task: str = Field(..., description="Título do evento.")
    module: str = Field(..., description="Código extraído do título ou 'Meeting'.")
    manhours: int = Field(..., description="Horas arredondadas entre início e fim.")
    project: str = Field(..., description="Projeto padrão informado pelo chamador.")
    cr_no: str = Field(default="", alias="crNo", description="Código completo casado.")
    date: str = Field(..., description="Data de início em DD-MM-YYYY.")

    def to_payload(self) -> dict[str, Any]:
        """Serializa com os nomes de campo externos (crNo)."""
        return self.model_dump(by_alias=True)


__all__ = ["Task"]
