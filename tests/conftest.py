"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from moneymath import CalculatorConfig, DecimalCalculator


@pytest.fixture
def calc() -> DecimalCalculator:
    """Calculator with the default configuration."""
    return DecimalCalculator()


@pytest.fixture
def calc_scale_2() -> DecimalCalculator:
    """Calculator that divides to 2 fractional digits by default."""
    return DecimalCalculator(CalculatorConfig(division_scale=2))


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog.configure() a test performed."""
    yield
    structlog.reset_defaults()
