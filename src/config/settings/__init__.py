"""Agregador de settings do calendar_worklog.

Re-exporta as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.calendar import (
    CalendarSettings,
    get_calendar_settings,
)

__all__ = [
    "BaseSettings",
    "CalendarSettings",
    "Environment",
    "get_base_settings",
    "get_calendar_settings",
]
