"""Configuração do pytest para o projeto calendar_worklog."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ (imports absolutos) e a raiz (tests.fakes) ao PYTHONPATH
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config.settings import get_base_settings, get_calendar_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas; cada teste lê o próprio ambiente."""
    get_calendar_settings.cache_clear()
    get_base_settings.cache_clear()
    yield
    get_calendar_settings.cache_clear()
    get_base_settings.cache_clear()
