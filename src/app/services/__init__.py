"""Serviços de aplicação.

Unidades reutilizáveis sem IO direto. Implementações concretas de IO
ficam em app/infra/.
"""

from app.services.task_rules import DEFAULT_TASK_RULES, ModuleMatch, TaskRules

__all__ = [
    "DEFAULT_TASK_RULES",
    "ModuleMatch",
    "TaskRules",
]
