"""Use cases de calendário."""

from .fetch_day_tasks import FetchDayTasksUseCase

__all__ = ["FetchDayTasksUseCase"]
