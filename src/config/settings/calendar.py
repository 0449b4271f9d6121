"""Settings de integração com Google OAuth e Google Calendar.

Centralizar a leitura de env aqui evita espalhar parse de configuração
pelos clients. Client id e conta vazios não são erro: as operações
degradam silenciosamente para no-op.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_REDIRECT_URI = "http://127.0.0.1:8765/oauth2callback"


class CalendarSettings(BaseModel):
    """Configurações da integração de calendário usadas pelos clients."""

    model_config = ConfigDict(extra="ignore")

    google_client_id: str = Field(
        default="",
        description="Client ID OAuth (tipo desktop/iOS, sem secret, com PKCE).",
    )
    google_account_id: str = Field(
        default="",
        description="Calendário consultado (geralmente o email da conta).",
    )
    default_project: str = Field(
        default="108",
        description="Projeto atribuido a todas as tasks geradas.",
    )
    oauth_redirect_uri: str = Field(
        default=DEFAULT_REDIRECT_URI,
        description="Redirect URI registrado no client OAuth.",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout das chamadas HTTP ao Google.",
    )
    calendar_timezone: str | None = Field(
        default=None,
        description="Timezone para formatar a data das tasks; None usa o offset do evento.",
    )

    @property
    def is_configured(self) -> bool:
        """True quando client id e conta estão presentes."""
        return bool(self.google_client_id and self.google_account_id)


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _load_calendar_from_env() -> CalendarSettings:
    """Carrega CalendarSettings a partir de variáveis de ambiente."""
    return CalendarSettings(
        google_client_id=os.getenv("GOOGLE_CLIENT_ID", "").strip(),
        google_account_id=os.getenv("GOOGLE_ACCOUNT_ID", "").strip(),
        default_project=os.getenv("WORKLOG_DEFAULT_PROJECT", "108"),
        oauth_redirect_uri=os.getenv("GOOGLE_OAUTH_REDIRECT_URI", DEFAULT_REDIRECT_URI),
        request_timeout_seconds=float(os.getenv("GOOGLE_REQUEST_TIMEOUT_SECONDS", "30")),
        calendar_timezone=_read_optional_env("CALENDAR_TIMEZONE"),
    )


@lru_cache(maxsize=1)
def get_calendar_settings() -> CalendarSettings:
    """Retorna instância cacheada de CalendarSettings."""
    return _load_calendar_from_env()


__all__ = ["CalendarSettings", "get_calendar_settings"]
