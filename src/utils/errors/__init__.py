"""Exceções utilitarias compartilhadas."""

from .exceptions import (
    AuthorizationDeniedError,
    CalendarFetchError,
    GoogleConfigurationError,
    GoogleIntegrationError,
    TokenExchangeError,
    TokenRefreshError,
)

__all__ = [
    "AuthorizationDeniedError",
    "CalendarFetchError",
    "GoogleConfigurationError",
    "GoogleIntegrationError",
    "TokenExchangeError",
    "TokenRefreshError",
]
