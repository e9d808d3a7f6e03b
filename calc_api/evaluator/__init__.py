"""Expression evaluator - tokenizer, shunting-yard converter, postfix evaluator."""

from .classifiers import is_numeric, is_operator, parse_number, precedence
from .converter import infix_to_postfix
from .exceptions import (
    USER_ERROR_KINDS,
    DivisionByZeroError,
    ErrorKind,
    EvaluationError,
    InvalidInputError,
    MismatchedParenthesesError,
)
from .postfix import apply_operator, evaluate_postfix
from .service import calc, format_result
from .tokenizer import tokenize


__all__ = [
    "calc",
    "format_result",
    "tokenize",
    "infix_to_postfix",
    "evaluate_postfix",
    "apply_operator",
    "is_numeric",
    "is_operator",
    "parse_number",
    "precedence",
    "ErrorKind",
    "USER_ERROR_KINDS",
    "EvaluationError",
    "MismatchedParenthesesError",
    "InvalidInputError",
    "DivisionByZeroError",
]
