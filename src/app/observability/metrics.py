"""Registro de métricas via structured logging.

As métricas são logs estruturados agregáveis depois (BigQuery,
CloudWatch Insights, etc.).

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("fetch_day_tasks", "execute", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "google_calendar_client")
        operation: Nome da operação (ex: "fetch_events")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_task_count(
    component: str,
    fetched: int,
    kept: int,
    correlation_id: str | None = None,
) -> None:
    """Registra quantos eventos viraram tasks após o filtro de títulos."""
    logger.info(
        "metric_task_count",
        extra={
            "metric_type": "counter",
            "component": component,
            "fetched": fetched,
            "kept": kept,
            "excluded": fetched - kept,
            "correlation_id": correlation_id,
        },
    )
