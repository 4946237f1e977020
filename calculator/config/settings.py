"""Calculator configuration management."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from ..exceptions import ConfigurationError
from ..models.enums import OverflowPolicy, SUPPORTED_INTEGER_BITS


@dataclass(frozen=True)
class CalculatorConfig:
    """Calculator configuration with environment variable support."""

    # Arithmetic
    integer_bits: int = 32
    overflow_policy: OverflowPolicy = OverflowPolicy.WRAP

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    def __post_init__(self):
        if self.integer_bits not in SUPPORTED_INTEGER_BITS:
            raise ConfigurationError(
                f"Unsupported integer width {self.integer_bits}, "
                f"expected one of {list(SUPPORTED_INTEGER_BITS)}"
            )
        if not isinstance(self.overflow_policy, OverflowPolicy):
            raise ConfigurationError(f"Invalid overflow policy: {self.overflow_policy!r}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"Invalid log level: {self.log_level!r}")

    @classmethod
    def from_environment(cls) -> "CalculatorConfig":
        """Create configuration from environment variables."""
        bits = os.environ.get("CALCULATOR_INTEGER_BITS", "32")
        try:
            integer_bits = int(bits)
        except ValueError:
            raise ConfigurationError(f"CALCULATOR_INTEGER_BITS must be an integer, got {bits!r}") from None

        return cls(
            integer_bits=integer_bits,
            overflow_policy=parse_overflow_policy(os.environ.get("CALCULATOR_OVERFLOW_POLICY", "wrap")),
            log_level=os.environ.get("CALCULATOR_LOG_LEVEL", "INFO").upper(),
            log_json=os.environ.get("CALCULATOR_LOG_JSON", "false").lower() in ("true", "1", "t")
        )


def parse_overflow_policy(value: str) -> OverflowPolicy:
    try:
        return OverflowPolicy(value.strip().lower())
    except ValueError:
        choices = [policy.value for policy in OverflowPolicy]
        raise ConfigurationError(f"Invalid overflow policy {value!r}, expected one of {choices}") from None


# Global config instance
_config: Optional[CalculatorConfig] = None


def get_config() -> CalculatorConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = CalculatorConfig.from_environment()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the environment is read again."""
    global _config
    _config = None
