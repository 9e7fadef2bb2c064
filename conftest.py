"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _default_locale(monkeypatch):
    """Pin the process-wide default locale so results don't depend on the host's LANG."""
    monkeypatch.setenv("CURRENCY_FORMATTER_LOCALE", "en_US")
    yield
