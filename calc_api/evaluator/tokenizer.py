"""Split a raw expression string into lexical tokens."""

from typing import List

from .classifiers import OPERATORS, PARENTHESES

DELIMITERS = OPERATORS | PARENTHESES


def tokenize(expression: str) -> List[str]:
    """Split an expression into operator, parenthesis and literal tokens.

    Spaces are skipped. Every other character that is not an operator or a
    parenthesis is accumulated into a literal; literals are not validated
    here.

    Args:
        expression: Raw expression text.

    Returns:
        Tokens in input order. Empty input yields an empty list.
    """
    tokens: List[str] = []
    literal: List[str] = []

    for char in expression:
        if char == " ":
            continue
        if char in DELIMITERS:
            if literal:
                tokens.append("".join(literal))
                literal = []
            tokens.append(char)
        else:
            literal.append(char)

    if literal:
        tokens.append("".join(literal))
    return tokens
