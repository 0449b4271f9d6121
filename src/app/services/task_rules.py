"""Classificação determinística de eventos em tasks (sem LLM).

Regras de negócio:
- O primeiro código no formato ``ABC-123`` do título define o módulo
  (parte antes do hífen, em maiúsculas) e o número de CR (código completo).
- Sem código, o evento é tratado como reunião ("Meeting") e o CR fica vazio.
- Títulos de ausência (almoço, fora do escritório) não viram task; a
  comparação é exata após upper(), sem strip.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

MODULE_CODE_PATTERN = re.compile(r"([a-zA-Z1-9]{3,10})-(\d+)")
DEFAULT_MODULE = "Meeting"
EXCLUDED_TITLES = frozenset({"LUNCH", "OUT OF OFFICE"})


@dataclass(frozen=True)
class ModuleMatch:
    module: str
    cr_no: str


@dataclass(frozen=True)
class TaskRules:
    """Conjunto de regras aplicado a cada título de evento."""

    module_pattern: re.Pattern[str] = MODULE_CODE_PATTERN
    fallback_module: str = DEFAULT_MODULE
    excluded_titles: frozenset[str] = EXCLUDED_TITLES

    def classify(self, summary: str) -> ModuleMatch:
        match = self.module_pattern.search(summary)
        if match is None:
            return ModuleMatch(module=self.fallback_module, cr_no="")
        cr_no = match.group(0)
        return ModuleMatch(module=cr_no.split("-")[0].upper(), cr_no=cr_no)

    def is_excluded(self, title: str) -> bool:
        return title.upper() in self.excluded_titles


DEFAULT_TASK_RULES = TaskRules()
