"""Pytest configuration and fixtures for euclid-gcd tests."""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from euclid_gcd.core.calculator import GcdCalculator
from euclid_gcd.core.config import GcdConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove euclid-gcd variables so the host environment cannot leak in."""
    monkeypatch.delenv("EUCLID_GCD_LOG_LEVEL", raising=False)
    monkeypatch.delenv("EUCLID_GCD_ALLOW_ZERO_PAIR", raising=False)


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Restore root logger state changed by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    logging.disable(logging.NOTSET)
    root_logger.handlers = handlers
    root_logger.setLevel(level)


@pytest.fixture
def calculator() -> GcdCalculator:
    """Create a GcdCalculator with default config."""
    return GcdCalculator()


@pytest.fixture
def strict_calculator() -> GcdCalculator:
    """Create a GcdCalculator that rejects gcd(0, 0)."""
    return GcdCalculator(GcdConfig(allow_zero_pair=False))
