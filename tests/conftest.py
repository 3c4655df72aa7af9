"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from pwstrength.config import get_settings
from pwstrength.evaluator.service import PasswordEvaluator


@pytest.fixture
def evaluator() -> PasswordEvaluator:
    """Evaluator with the built-in criteria."""
    return PasswordEvaluator()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
