"""Protocolos e contratos do core da aplicação."""

from .authorization_prompt import AuthorizationPromptProtocol
from .calendar_service import CalendarAuthorizerProtocol, CalendarServiceProtocol
from .token_cache import TokenCacheProtocol

__all__ = [
    "AuthorizationPromptProtocol",
    "CalendarAuthorizerProtocol",
    "CalendarServiceProtocol",
    "TokenCacheProtocol",
]
