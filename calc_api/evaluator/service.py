"""Expression evaluation entry point and result formatting."""

import math
from decimal import Decimal

import structlog

from .converter import infix_to_postfix
from .postfix import evaluate_postfix
from .tokenizer import tokenize

logger = structlog.get_logger("evaluator")

# Decimal exponents outside [-4, 6) switch to scientific notation.
MIN_FIXED_EXPONENT = -4
MAX_FIXED_EXPONENT = 6


def calc(expression: str) -> float:
    """Evaluate an arithmetic expression.

    Args:
        expression: Infix expression using numbers, ``+ - * /`` and
            parentheses.

    Returns:
        The floating-point result.

    Raises:
        EvaluationError: If the expression is malformed or divides by zero.
    """
    tokens = tokenize(expression)
    postfix = infix_to_postfix(tokens)
    result = evaluate_postfix(postfix)
    logger.debug("expression_evaluated", token_count=len(tokens), result=result)
    return result


def format_result(value: float) -> str:
    """Format a float in compact general notation.

    Uses the shortest digit string that round-trips, switching to
    ``d.ddde±XX`` when the decimal exponent is below -4 or at least 6.

    Args:
        value: The value to format.

    Returns:
        The formatted value, e.g. ``14``, ``0.5``, ``1.234567e+06``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    # repr() yields the shortest round-tripping digits.
    normalized = Decimal(repr(value)).normalize()
    sign, digits, exponent = normalized.as_tuple()
    point_exponent = len(digits) + exponent - 1

    if normalized.is_zero() or MIN_FIXED_EXPONENT <= point_exponent < MAX_FIXED_EXPONENT:
        return format(normalized, "f")

    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(digit) for digit in digits[1:])
    exponent_sign = "-" if point_exponent < 0 else "+"
    return f"{'-' if sign else ''}{mantissa}e{exponent_sign}{abs(point_exponent):02d}"
