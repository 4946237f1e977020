import csv
from collections import defaultdict
from pathlib import Path

import pytest

from calculator import Calculator, CalculatorConfig, OperationService, OverflowPolicy
from calculator.config import settings
from calculator.utils.logging import setup_logging

FIXTURES_DIR = Path(__file__).parent / "fixtures"

CALCULATOR_ENV_VARS = [
    "CALCULATOR_INTEGER_BITS",
    "CALCULATOR_OVERFLOW_POLICY",
    "CALCULATOR_LOG_LEVEL",
    "CALCULATOR_LOG_JSON",
]


def load_csv_cases(filename):
    """Read integer rows from a fixture CSV, skipping blank and `#` lines."""
    with open(FIXTURES_DIR / filename, newline="") as f:
        rows = [line for line in f if line.strip() and not line.lstrip().startswith("#")]
    return [tuple(int(value) for value in row) for row in csv.reader(rows)]


def pytest_generate_tests(metafunc):
    """Parametrize `subtraction_case` from the subtraction fixture file."""
    if "subtraction_case" in metafunc.fixturenames:
        cases = load_csv_cases("integer_subtraction.csv")
        metafunc.parametrize(
            "subtraction_case",
            cases,
            ids=[f"{m}-({s})={e}" for m, s, e in cases]
        )


def pytest_collection_modifyitems(config, items):
    """Reorder tests carrying `@pytest.mark.order(n)` within their module.

    Unmarked tests keep their collected position.
    """
    positions = defaultdict(list)
    for index, item in enumerate(items):
        if item.get_closest_marker("order") is not None:
            positions[item.nodeid.split("::")[0]].append(index)

    for indexes in positions.values():
        ordered = sorted(
            (items[i] for i in indexes),
            key=lambda item: item.get_closest_marker("order").args[0]
        )
        for i, item in zip(indexes, ordered):
            items[i] = item


@pytest.fixture(autouse=True)
def configure_logging():
    """Route structlog through the stdlib logger captured by pytest."""
    setup_logging("DEBUG")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run each test without CALCULATOR_* variables or a cached config."""
    for var in CALCULATOR_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    settings.reset_config()
    yield
    settings.reset_config()


@pytest.fixture
def config():
    return CalculatorConfig()


@pytest.fixture
def calculator(config):
    """32-bit calculator that wraps on overflow"""
    return Calculator(config)


@pytest.fixture
def strict_calculator():
    """32-bit calculator that raises on overflow"""
    return Calculator(CalculatorConfig(overflow_policy=OverflowPolicy.RAISE))


@pytest.fixture
def operation_service(calculator):
    return OperationService(calculator)
