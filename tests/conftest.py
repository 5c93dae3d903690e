"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from typing import Any, Dict, List

import pytest

from centwise.core import config as config_module
from centwise.core.settings import MoneySettings

DISPLAY_ENV_VARS = [
    "CENTWISE_SYMBOL",
    "CENTWISE_SEPARATOR",
    "CENTWISE_DECIMAL",
    "CENTWISE_PRECISION",
    "CENTWISE_USE_VEDIC",
    "CENTWISE_PATTERN",
    "CENTWISE_NEGATIVE_PATTERN",
]


@pytest.fixture
def euro_settings() -> MoneySettings:
    """European-style display settings."""
    return MoneySettings(symbol="€", separator=".", decimal=",", pattern="# !", negative_pattern="-# !")


@pytest.fixture
def round_trip_cases() -> List[Dict[str, Any]]:
    """Amount strings and their canonical form at precision 2."""
    return [
        {"input": "0", "canonical": "0.00"},
        {"input": "0.01", "canonical": "0.01"},
        {"input": "-0.01", "canonical": "-0.01"},
        {"input": "12.3", "canonical": "12.30"},
        {"input": "12.34", "canonical": "12.34"},
        {"input": "-12.34", "canonical": "-12.34"},
        {"input": ".5", "canonical": "0.50"},
        {"input": "1234567.89", "canonical": "1234567.89"},
        {"input": "999999999.99", "canonical": "999999999.99"},
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables and a fresh configuration."""
    monkeypatch.setenv("CENTWISE_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("DEBUG", "false")
    for name in DISPLAY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    # Drop any configuration cached by an earlier test
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency handling and precision"
    )
    config.addinivalue_line(
        "markers", "cli: Tests for command-line commands"
    )
