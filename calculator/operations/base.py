"""
Base interface for calculator operation plugins.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from ..calculator import Calculator


class Operation(ABC):
    """Base class for all calculator operations."""

    symbol: str = "?"

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the operation name."""
        pass

    @abstractmethod
    def execute(self, a: int, b: int, calculator: Calculator) -> int:
        """
        Execute the operation on two integers.

        Args:
            a: First operand
            b: Second operand
            calculator: Calculator carrying the integer width and overflow policy

        Returns:
            Result of the operation

        Raises:
            InvalidOperandError: If operation cannot be performed with given inputs
            ArithmeticError: If operation results in mathematical error
        """
        pass

    def get_metadata(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "symbol": self.symbol,
            "description": (type(self).__doc__ or "").strip()
        }
