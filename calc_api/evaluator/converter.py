"""Infix to postfix conversion using the shunting-yard algorithm."""

from typing import Iterable, List

from .classifiers import is_numeric, is_operator, precedence
from .exceptions import InvalidInputError, MismatchedParenthesesError


def infix_to_postfix(tokens: Iterable[str]) -> List[str]:
    """Reorder infix tokens into Reverse Polish order.

    All operators are left-associative: an operator on the stack with equal
    or higher precedence is emitted before the incoming one is pushed.

    Args:
        tokens: Infix tokens as produced by ``tokenize``.

    Returns:
        Tokens in postfix order.

    Raises:
        MismatchedParenthesesError: If parentheses do not balance.
        InvalidInputError: If a token is neither a number, an operator nor a
            parenthesis.
    """
    output: List[str] = []
    operators: List[str] = []

    for token in tokens:
        if is_numeric(token):
            output.append(token)
        elif token == "(":
            operators.append(token)
        elif token == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                raise MismatchedParenthesesError()
            operators.pop()
        elif is_operator(token):
            while (
                operators
                and operators[-1] != "("
                and precedence(operators[-1]) >= precedence(token)
            ):
                output.append(operators.pop())
            operators.append(token)
        else:
            raise InvalidInputError(token)

    while operators:
        top = operators.pop()
        if top == "(":
            raise MismatchedParenthesesError()
        output.append(top)
    return output
