"""Fixed-width integer calculator."""

from .calculator import Calculator
from .config.settings import CalculatorConfig, get_config
from .exceptions import (
    CalculatorError,
    ConfigurationError,
    DivisionByZeroError,
    IntegerOverflowError,
    InvalidOperandError,
    UnknownOperationError,
)
from .models import Calculation, OverflowPolicy
from .services.operation_service import OperationService

__version__ = "1.0.0"

__all__ = [
    "Calculator",
    "CalculatorConfig",
    "get_config",
    "CalculatorError",
    "ConfigurationError",
    "DivisionByZeroError",
    "IntegerOverflowError",
    "InvalidOperandError",
    "UnknownOperationError",
    "Calculation",
    "OverflowPolicy",
    "OperationService"
]
