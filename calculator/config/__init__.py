"""Configuration module for the calculator."""

from .settings import CalculatorConfig, get_config, parse_overflow_policy, reset_config

__all__ = ["CalculatorConfig", "get_config", "parse_overflow_policy", "reset_config"]
