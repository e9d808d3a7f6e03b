"""Reduce a postfix token sequence to a single value."""

import operator
from typing import Callable, Dict, Iterable, List

from .classifiers import is_operator, parse_number
from .exceptions import DivisionByZeroError, InvalidInputError

BINARY_OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def apply_operator(symbol: str, left: float, right: float) -> float:
    """Apply a binary operator as ``left symbol right``.

    Args:
        symbol: One of ``+ - * /``.
        left: Earlier operand.
        right: Later operand.

    Returns:
        The IEEE-754 result. Overflow and NaN are returned as-is.

    Raises:
        DivisionByZeroError: If dividing by exactly zero.
        InvalidInputError: If the symbol is not a known operator.
    """
    operation = BINARY_OPERATIONS.get(symbol)
    if operation is None:
        raise InvalidInputError(symbol)
    if symbol == "/" and right == 0:
        raise DivisionByZeroError()
    return operation(left, right)


def evaluate_postfix(postfix: Iterable[str]) -> float:
    """Evaluate a postfix expression with a value stack.

    Args:
        postfix: Tokens in Reverse Polish order.

    Returns:
        The single value left on the stack.

    Raises:
        InvalidInputError: On unknown tokens, missing operands, or when the
            stack does not end with exactly one value.
        DivisionByZeroError: On division by zero.
    """
    stack: List[float] = []

    for token in postfix:
        value = parse_number(token)
        if value is not None:
            stack.append(value)
        elif is_operator(token):
            if len(stack) < 2:
                raise InvalidInputError()
            right = stack.pop()
            left = stack.pop()
            stack.append(apply_operator(token, left, right))
        else:
            raise InvalidInputError(token)

    if len(stack) != 1:
        raise InvalidInputError()
    return stack[0]
