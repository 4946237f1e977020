"""Command-line entry point: evaluate a single operation."""

import argparse
import json
import sys
from dataclasses import replace
from typing import List, Optional

from .calculator import Calculator
from .config.settings import get_config, parse_overflow_policy
from .exceptions import CalculatorError
from .models.enums import SUPPORTED_INTEGER_BITS
from .services.operation_service import OperationService
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="calculator",
        description="Fixed-width integer calculator"
    )
    parser.add_argument("operation", nargs="?", help="Operation name, e.g. divide or subtract")
    parser.add_argument("a", nargs="?", type=int, help="First operand")
    parser.add_argument("b", nargs="?", type=int, help="Second operand")
    parser.add_argument("--bits", type=int, choices=SUPPORTED_INTEGER_BITS,
                        help="Integer width (default: CALCULATOR_INTEGER_BITS or 32)")
    parser.add_argument("--overflow", choices=["wrap", "raise"],
                        help="Overflow policy (default: CALCULATOR_OVERFLOW_POLICY or wrap)")
    parser.add_argument("--json", action="store_true", help="Print the calculation as JSON")
    parser.add_argument("--log-level", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default: CALCULATOR_LOG_LEVEL or INFO)")
    parser.add_argument("--list", action="store_true", help="List available operations and exit")

    args = parser.parse_args(argv)
    if not args.list and (args.operation is None or args.a is None or args.b is None):
        parser.error("operation, a and b are required unless --list is given")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = get_config()
        overrides = {}
        if args.bits is not None:
            overrides["integer_bits"] = args.bits
        if args.overflow is not None:
            overrides["overflow_policy"] = parse_overflow_policy(args.overflow)
        if args.log_level is not None:
            overrides["log_level"] = args.log_level
        config = replace(config, **overrides)
    except CalculatorError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level, config.log_json)
    service = OperationService(Calculator(config))

    if args.list:
        for metadata in service.get_operations_metadata():
            print(f"{metadata['name']} ({metadata['symbol']}): {metadata['description']}")
        return 0

    try:
        calculation = service.calculate(args.operation, args.a, args.b)
    except CalculatorError as e:
        logger.debug("Calculation failed", operation=args.operation, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(calculation.to_dict()))
    else:
        print(calculation.result)
    return 0

