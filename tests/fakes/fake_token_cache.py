"""Fake de token cache que registra as chamadas recebidas."""

from __future__ import annotations

from app.domain.oauth import TokenSet


class FakeTokenCache:
    """Implementa o protocolo sem IO e guarda histórico para asserts."""

    def __init__(self, tokens: TokenSet | None = None) -> None:
        self.tokens = tokens
        self.stored: list[TokenSet] = []
        self.remove_calls = 0

    async def get_tokens(self) -> TokenSet | None:
        return self.tokens

    async def set_tokens(self, tokens: TokenSet) -> None:
        self.tokens = tokens
        self.stored.append(tokens)

    async def remove_tokens(self) -> None:
        self.tokens = None
        self.remove_calls += 1
