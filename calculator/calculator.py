"""Integer calculator over a fixed signed width."""

from typing import Optional

from .config.settings import CalculatorConfig, get_config
from .utils.integers import apply_overflow_policy, truncating_divide, validate_operand
from .utils.logging import get_logger

logger = get_logger(__name__)


class Calculator:
    """
    Integer division and subtraction.

    Operands and results are signed integers of `config.integer_bits` width.
    Results that leave that range are wrapped or rejected according to
    `config.overflow_policy`. Instances hold no mutable state and may be
    shared between threads.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config if config is not None else get_config()

    @property
    def integer_bits(self) -> int:
        return self.config.integer_bits

    def perform_integer_division(self, dividend: int, divisor: int) -> int:
        """
        Divide dividend by divisor, rounding the quotient toward zero.

        Args:
            dividend: Number to be divided
            divisor: Number to divide by

        Returns:
            Truncated quotient

        Raises:
            DivisionByZeroError: If divisor is zero
            InvalidOperandError: If an operand is not an integer of the configured width
            IntegerOverflowError: If the quotient overflows and the policy is RAISE
        """
        bits = self.config.integer_bits
        validate_operand(dividend, bits, "dividend")
        validate_operand(divisor, bits, "divisor")

        # MIN / -1 is the only quotient that can leave the range
        quotient = truncating_divide(dividend, divisor)
        result = apply_overflow_policy(quotient, bits, self.config.overflow_policy)
        logger.debug("Performed integer division", dividend=dividend, divisor=divisor, result=result)
        return result

    def perform_integer_subtraction(self, minuend: int, subtractor: int) -> int:
        """
        Subtract subtractor from minuend.

        Raises:
            InvalidOperandError: If an operand is not an integer of the configured width
            IntegerOverflowError: If the difference overflows and the policy is RAISE
        """
        bits = self.config.integer_bits
        validate_operand(minuend, bits, "minuend")
        validate_operand(subtractor, bits, "subtractor")

        result = apply_overflow_policy(minuend - subtractor, bits, self.config.overflow_policy)
        logger.debug("Performed integer subtraction", minuend=minuend, subtractor=subtractor, result=result)
        return result
