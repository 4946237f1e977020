"""Divide operation plugin."""

from .base import Operation


class DivideOperation(Operation):
    """Divide first integer by second, truncating toward zero."""

    symbol = "/"

    @property
    def name(self) -> str:
        return "divide"

    def execute(self, a: int, b: int, calculator) -> int:
        """Divide a by b; the calculator validates operands before the zero check."""
        return calculator.perform_integer_division(a, b)
