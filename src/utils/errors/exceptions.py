"""Exceções de integração com Google (OAuth e Calendar)."""

from __future__ import annotations


class GoogleIntegrationError(RuntimeError):
    """Base para falhas de chamadas aos endpoints do Google.

    A mensagem é o status text da resposta HTTP, como devolvido pelo provider.
    """

    def __init__(
        self,
        status_text: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(status_text)
        self.status_text = status_text
        self.status_code = status_code


class GoogleConfigurationError(GoogleIntegrationError):
    """Chamada de token sem client id configurado."""


class TokenExchangeError(GoogleIntegrationError):
    """Troca de authorization code por tokens falhou."""


class TokenRefreshError(GoogleIntegrationError):
    """Renovação de tokens via refresh_token falhou."""


class CalendarFetchError(GoogleIntegrationError):
    """Listagem de eventos do calendário falhou."""


class AuthorizationDeniedError(GoogleIntegrationError):
    """Consentimento interativo não devolveu um authorization code válido."""
