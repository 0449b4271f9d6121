"""Contrato do token cache seguro fornecido pelo host.

O armazenamento real (keychain, secret manager) e responsabilidade do
host; este pacote só lê, grava e remove o TokenSet através do contrato.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.oauth import TokenSet


@runtime_checkable
class TokenCacheProtocol(Protocol):
    """Contrato de leitura/escrita do TokenSet."""

    async def get_tokens(self) -> TokenSet | None:
        """Retorna os tokens armazenados ou None."""
        ...

    async def set_tokens(self, tokens: TokenSet) -> None:
        """Substitui os tokens armazenados."""
        ...

    async def remove_tokens(self) -> None:
        """Apaga os tokens, forcando nova autorização."""
        ...
