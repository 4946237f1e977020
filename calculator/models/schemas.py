"""Data classes for calculator results."""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Calculation:
    """A single evaluated operation."""
    operation: str
    a: int
    b: int
    result: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
