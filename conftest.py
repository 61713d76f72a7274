"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from spelled_numbers.locales import clear_cache  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep a developer's SPELLED_NUMBERS_* environment out of the suite."""
    for name in ("SPELLED_NUMBERS_LOCALE", "SPELLED_NUMBERS_FALLBACK", "SPELLED_NUMBERS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield
    clear_cache()
