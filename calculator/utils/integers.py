"""Fixed-width signed integer arithmetic.

Python integers are unbounded, so every result is reduced to the configured
width here, either by two's-complement wraparound or by raising.
"""

from typing import Any, Tuple

from ..exceptions import DivisionByZeroError, IntegerOverflowError, InvalidOperandError
from ..models.enums import OverflowPolicy


def integer_range(bits: int) -> Tuple[int, int]:
    """Return the (minimum, maximum) values of a signed integer of `bits` width."""
    if bits < 1:
        raise ValueError(f"Integer width must be positive, got {bits}")
    half = 1 << (bits - 1)
    return -half, half - 1


def wrap(value: int, bits: int) -> int:
    """Reduce `value` to a signed `bits`-wide integer using two's complement."""
    modulus = 1 << bits
    value &= modulus - 1
    if value >= modulus >> 1:
        value -= modulus
    return value


def check_overflow(value: int, bits: int) -> int:
    """Return `value` unchanged or raise IntegerOverflowError if it does not fit."""
    minimum, maximum = integer_range(bits)
    if not minimum <= value <= maximum:
        raise IntegerOverflowError(value, bits)
    return value


def apply_overflow_policy(value: int, bits: int, policy: OverflowPolicy) -> int:
    if policy is OverflowPolicy.RAISE:
        return check_overflow(value, bits)
    return wrap(value, bits)


def truncating_divide(dividend: int, divisor: int) -> int:
    """
    Divide two integers, rounding the quotient toward zero.

    Floor division (`//`) rounds toward negative infinity, so the quotient is
    computed on magnitudes and the sign restored afterwards.

    Raises:
        DivisionByZeroError: If divisor is zero
    """
    if divisor == 0:
        raise DivisionByZeroError()
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


def validate_operand(value: Any, bits: int, name: str = "operand") -> int:
    """
    Check that `value` is a plain int inside the signed `bits` range.

    Raises:
        InvalidOperandError: If the value is not an int, is a bool, or is out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOperandError(
            f"{name} must be an integer, got {type(value).__name__}",
            name=name,
            value=value
        )
    minimum, maximum = integer_range(bits)
    if not minimum <= value <= maximum:
        raise InvalidOperandError(
            f"{name} {value} is outside the {bits}-bit range [{minimum}, {maximum}]",
            name=name,
            value=value
        )
    return value
