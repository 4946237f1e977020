"""Utility modules for calculator functionality."""

from .integers import (
    apply_overflow_policy,
    check_overflow,
    integer_range,
    truncating_divide,
    validate_operand,
    wrap,
)
from .logging import get_logger, setup_logging

__all__ = [
    "apply_overflow_policy",
    "check_overflow",
    "integer_range",
    "truncating_divide",
    "validate_operand",
    "wrap",
    "get_logger",
    "setup_logging"
]
