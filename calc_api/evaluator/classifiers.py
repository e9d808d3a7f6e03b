"""Token classification predicates shared by the converter and evaluator."""

import math
import re

OPERATORS = frozenset({"+", "-", "*", "/"})
PARENTHESES = frozenset({"(", ")"})

PRECEDENCE = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}

_INFINITY_LITERALS = frozenset({"inf", "infinity"})

# Hexadecimal mantissa with a mandatory binary exponent, e.g. 0x1p3 or 0x1.8P+1.
HEX_FLOAT_RE = re.compile(
    r"^[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?\d+$"
)


def parse_number(token: str) -> float | None:
    """Parse a numeric literal, returning None when it is not one.

    Accepts decimal and exponential notation with an optional leading sign,
    hexadecimal floats with a ``p`` exponent, and the
    ``inf``/``infinity``/``nan`` spellings. Literals that overflow a double,
    contain whitespace or non-ASCII digits, or use ``_`` digit separators are
    rejected.
    """
    if not token or not token.isascii() or "_" in token or token != token.strip():
        return None
    if HEX_FLOAT_RE.match(token):
        try:
            return float.fromhex(token)
        except OverflowError:
            return None
    try:
        value = float(token)
    except ValueError:
        return None
    if math.isinf(value) and token.lstrip("+-").lower() not in _INFINITY_LITERALS:
        return None
    return value


def is_numeric(token: str) -> bool:
    return parse_number(token) is not None


def is_operator(token: str) -> bool:
    return token in OPERATORS


def precedence(token: str) -> int:
    """Binding strength of an operator; 0 for anything else."""
    return PRECEDENCE.get(token, 0)
