"""Helpers internos de parsing para requests e respostas da Google Calendar API."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, time
from typing import TYPE_CHECKING, Any

from app.domain.worklog import Task
from app.services.task_rules import DEFAULT_TASK_RULES

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

    from googleapiclient.errors import HttpError

    from app.services.task_rules import TaskRules

_END_OF_DAY = time(23, 59, 59, 999000)


def utc_day_window(day: date | datetime) -> tuple[str, str]:
    """Retorna (timeMin, timeMax) RFC3339 cobrindo o dia UTC inteiro.

    datetime com timezone é convertido para UTC antes de tomar a data;
    datetime naive é tratado como UTC.
    """
    if isinstance(day, datetime):
        day = day.astimezone(UTC).date() if day.tzinfo else day.date()
    start = datetime.combine(day, time.min, tzinfo=UTC)
    end = datetime.combine(day, _END_OF_DAY, tzinfo=UTC)
    return _to_rfc3339(start), _to_rfc3339(end)


def map_event_to_task(
    payload: dict[str, Any],
    project: str,
    *,
    rules: TaskRules = DEFAULT_TASK_RULES,
    zone: ZoneInfo | None = None,
) -> Task:
    summary = str(payload.get("summary") or "")
    start = _extract_event_datetime(payload.get("start"), zone)
    end = _extract_event_datetime(payload.get("end"), zone)
    match = rules.classify(summary)
    return Task(
        task=summary,
        module=match.module,
        manhours=round_half_up((end - start).total_seconds() / 3600),
        project=project,
        cr_no=match.cr_no,
        date=start.strftime("%d-%m-%Y"),
    )


def round_half_up(value: float) -> int:
    """Arredonda .5 para cima, como Math.round (round() do Python é bancário)."""
    return math.floor(value + 0.5)


def parse_google_datetime(value: Any, zone: ZoneInfo | None) -> datetime | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=zone or UTC)
    return parsed.astimezone(zone) if zone is not None else parsed


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None


def http_status_text(exc: HttpError) -> str:
    response = getattr(exc, "resp", None)
    reason = getattr(response, "reason", None)
    if reason:
        return str(reason)
    status = http_status(exc)
    return str(status) if status is not None else "HttpError"


def http_error_body(exc: HttpError) -> str:
    content = getattr(exc, "content", b"")
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return str(content or "")


def _extract_event_datetime(value: Any, zone: ZoneInfo | None) -> datetime:
    if isinstance(value, dict):
        if parsed := parse_google_datetime(value.get("dateTime"), zone):
            return parsed
        # Eventos de dia inteiro trazem apenas "date"
        if isinstance(value.get("date"), str):
            return datetime.fromisoformat(value["date"]).replace(tzinfo=zone or UTC)
    raise ValueError("missing_event_datetime")


def _to_rfc3339(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
