"""Models and data structures for the calculator."""

from .enums import OverflowPolicy, SUPPORTED_INTEGER_BITS
from .schemas import Calculation

__all__ = [
    "OverflowPolicy",
    "SUPPORTED_INTEGER_BITS",
    "Calculation"
]
