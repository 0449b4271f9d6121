"""Bootstrap — composition root: logging, validação de settings e wiring.

Uso:
    from app.bootstrap import initialize_app
    from app.bootstrap.dependencies import create_fetch_day_tasks

    initialize_app()
    use_case = create_fetch_day_tasks(token_cache=host_token_cache)
    tasks = await use_case.execute(date.today())
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_calendar_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no startup."""
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido; em `development` apenas alerta,
    já que client id e conta ausentes degradam para no-op.
    """
    base = get_base_settings()
    calendar = get_calendar_settings()
    errors = [f"base: {error}" for error in base.validate()]
    if not calendar.google_client_id:
        errors.append("calendar: GOOGLE_CLIENT_ID não configurado")
    if not calendar.google_account_id:
        errors.append("calendar: GOOGLE_ACCOUNT_ID não configurado")

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = ["initialize_app", "validate_runtime_settings"]
