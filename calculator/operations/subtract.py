"""Subtract operation plugin."""

from .base import Operation


class SubtractOperation(Operation):
    """Subtract second integer from first."""

    symbol = "-"

    @property
    def name(self) -> str:
        return "subtract"

    def execute(self, a: int, b: int, calculator) -> int:
        """Subtract b from a."""
        return calculator.perform_integer_subtraction(a, b)
