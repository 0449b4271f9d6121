"""Token cache em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Sem persistência entre reinícios. Em produção o host injeta o
seu armazenamento seguro via TokenCacheProtocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.token_cache import TokenCacheProtocol

if TYPE_CHECKING:
    from app.domain.oauth import TokenSet


class MemoryTokenCache(TokenCacheProtocol):
    """Guarda um único TokenSet (sem multi-conta)."""

    def __init__(self, tokens: TokenSet | None = None) -> None:
        self._tokens = tokens

    async def get_tokens(self) -> TokenSet | None:
        return self._tokens.model_copy() if self._tokens is not None else None

    async def set_tokens(self, tokens: TokenSet) -> None:
        self._tokens = tokens.model_copy()

    async def remove_tokens(self) -> None:
        self._tokens = None
