"""Contrato do consentimento interativo OAuth."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.oauth import AuthorizationRequest


@runtime_checkable
class AuthorizationPromptProtocol(Protocol):
    """Conduz o usuário pelo consentimento e devolve o authorization code."""

    async def request_code(self, auth_request: AuthorizationRequest) -> str:
        """Retorna o code; levanta AuthorizationDeniedError se negado."""
        ...
