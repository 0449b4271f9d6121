"""Stores — implementações concretas de armazenamento.

Modulos disponíveis:
    - memory_token_cache: token cache em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_token_cache import MemoryTokenCache

__all__ = ["MemoryTokenCache"]
