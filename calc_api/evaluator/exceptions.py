"""Evaluation errors tagged with an explicit kind."""

from enum import Enum

from calc_api.exceptions import CalcServiceError


class ErrorKind(str, Enum):
    """Category of an evaluation failure."""

    mismatched_parentheses = "MISMATCHED_PARENTHESES"
    invalid_input = "INVALID_INPUT"
    division_by_zero = "DIVISION_BY_ZERO"


# Kinds caused by the submitted expression rather than by the service.
USER_ERROR_KINDS = frozenset(
    {
        ErrorKind.mismatched_parentheses,
        ErrorKind.invalid_input,
        ErrorKind.division_by_zero,
    }
)


class EvaluationError(CalcServiceError):
    """Raised when an expression cannot be converted or evaluated.

    Attributes:
        kind: Category of the failure.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message=message, code=kind.value)
        self.kind = kind

    @property
    def is_user_error(self) -> bool:
        """Whether the failure is attributable to the expression itself."""
        return self.kind in USER_ERROR_KINDS


class MismatchedParenthesesError(EvaluationError):
    """Raised when `(` and `)` do not balance."""

    def __init__(self):
        super().__init__(ErrorKind.mismatched_parentheses, "mismatched parentheses")


class InvalidInputError(EvaluationError):
    """Raised for unrecognized tokens or a malformed operand stack.

    Attributes:
        token: Offending token, when one is known.
    """

    def __init__(self, token: str | None = None):
        message = "invalid input" if token is None else f"invalid input: {token}"
        super().__init__(ErrorKind.invalid_input, message)
        self.token = token


class DivisionByZeroError(EvaluationError):
    """Raised when the divisor evaluates to exactly zero."""

    def __init__(self):
        super().__init__(ErrorKind.division_by_zero, "division by zero")
