"""Configuração centralizada de logging.

Logging JSON estruturado com campos obrigatórios (correlation_id, service,
level, logger, message) e helper para falhas HTTP dos providers.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="calendar_worklog")

    logger = get_logger(__name__)
    logger.info("calendar_events_fetched", extra={"count": 3})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "calendar_worklog"

# Corpo de resposta de erro é truncado para não inundar os logs
MAX_RESPONSE_TEXT_CHARS = 1000


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez no bootstrap.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)


def log_http_failure(
    logger: logging.Logger,
    message: str,
    *,
    component: str,
    action: str,
    status_code: int | None,
    response_text: str,
    correlation_id: str | None = None,
) -> None:
    """Loga falha HTTP de provider com o corpo da resposta truncado.

    Chamado imediatamente antes de levantar a exceção correspondente.

    Args:
        logger: Logger do módulo chamador.
        message: Evento estruturado (ex: "google_oauth_token_error").
        component: Nome do componente (ex: "google_oauth_client").
        action: Operação que falhou (ex: "refresh_tokens").
        status_code: Status HTTP da resposta, quando conhecido.
        response_text: Corpo bruto da resposta.
        correlation_id: ID de correlação da operação.
    """
    if len(response_text) > MAX_RESPONSE_TEXT_CHARS:
        response_text = response_text[:MAX_RESPONSE_TEXT_CHARS] + "..."
    logger.error(
        message,
        extra={
            "component": component,
            "action": action,
            "result": "error",
            "status_code": status_code,
            "response_text": response_text,
            "correlation_id": correlation_id,
        },
    )
