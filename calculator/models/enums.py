"""Enumerations for calculator settings."""

from enum import Enum


class OverflowPolicy(Enum):
    """What happens when a result leaves the integer range."""
    WRAP = "wrap"
    RAISE = "raise"


SUPPORTED_INTEGER_BITS = (8, 16, 32, 64)
