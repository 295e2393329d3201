"""Test configuration and shared fixtures for pytest."""

import logging
import os
from pathlib import Path

import pytest

from decimoney import MoneyCalculator
from decimoney.config import reset_settings

# === PYTEST CONFIGURATION ===


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on path."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


# === BASIC FIXTURES ===


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from DECIMONEY_* variables and cached settings."""
    for key in list(os.environ):
        if key.upper().startswith("DECIMONEY_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(Path(__file__).parent)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def clean_package_logger():
    """Remove handlers installed by setup_logging during a test."""
    yield
    package_logger = logging.getLogger("decimoney")
    for handler in package_logger.handlers[:]:
        handler.close()
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def calculator() -> MoneyCalculator:
    """Provide a calculator at the default precision (2, half away from zero)."""
    return MoneyCalculator()


@pytest.fixture(params=[0, 2, 4, 8])
def any_precision_calculator(request) -> MoneyCalculator:
    """Provide calculators over a spread of precisions."""
    return MoneyCalculator(precision=request.param)


# === SAMPLE AMOUNTS ===

SAMPLE_AMOUNTS = [
    "0",
    "0.00",
    "1",
    "-1",
    "10.005",
    "-10.005",
    "0.004",
    "123456789012345678901234567890.123456789",
    "-0.07",
    ".5",
    "7.",
    "+3.14159",
    "999999999999.995",
]


@pytest.fixture(params=SAMPLE_AMOUNTS)
def sample_amount(request) -> str:
    """Provide one valid amount per parametrization."""
    return request.param
