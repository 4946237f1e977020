"""Calculator exceptions."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for calculator errors."""
    pass


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Raised when an integer division is attempted with a zero divisor."""

    MESSAGE = "division by zero"

    def __init__(self):
        super().__init__(self.MESSAGE)


class IntegerOverflowError(CalculatorError, OverflowError):
    """Result does not fit the configured integer width."""

    def __init__(self, value: int, bits: int):
        super().__init__(f"{value} does not fit in a signed {bits}-bit integer")
        self.value = value
        self.bits = bits


class InvalidOperandError(CalculatorError, ValueError):
    """Operand is not an integer of the configured width."""

    def __init__(self, message: str, name: str = None, value: Any = None):
        super().__init__(message)
        self.name = name
        self.value = value


class UnknownOperationError(CalculatorError, KeyError):
    """Requested operation is not registered."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.message


class ConfigurationError(CalculatorError, ValueError):
    """Invalid configuration value."""
    pass
