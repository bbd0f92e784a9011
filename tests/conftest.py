"""
Shared pytest fixtures for fracmath tests.

This module provides:
- Helpers for asserting the canonical parts of a fraction
- Isolation of cached settings and logging configuration between tests
"""

import logging

import pytest

from fracmath.core.config import get_settings
from fracmath.core.logging import StructuredFormatter, TextFormatter
from fracmath.fraction import Fraction


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and FRACMATH_ environment overrides around each test."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE", "DEFAULT_EXPRESSION"):
        monkeypatch.delenv(f"FRACMATH_{name}", raising=False)
    get_settings.cache_clear()
    root = logging.getLogger()
    level = root.level
    yield
    get_settings.cache_clear()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, (TextFormatter, StructuredFormatter)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def assert_parts():
    """Helper to assert the stored (sign, numerator, denominator) of a fraction."""
    def _assert_parts(fraction: Fraction, sign: int, numerator: int, denominator: int) -> None:
        """
        Assert the canonical triple of a fraction.

        Args:
            fraction: Fraction under test
            sign: Expected sign, -1 or 1
            numerator: Expected absolute numerator
            denominator: Expected denominator
        """
        actual = (fraction.sign, fraction.numerator, fraction.denominator)
        expected = (sign, numerator, denominator)
        assert actual == expected, f"Fraction parts {actual} != {expected}"

    return _assert_parts
