"""Pydantic schemas for the calculate endpoint."""

from pydantic import BaseModel, Field, StrictStr


class CalculateRequest(BaseModel):
    """Expression submitted for evaluation.

    Attributes:
        expression: Infix arithmetic expression.
    """

    expression: StrictStr = Field(..., description="Arithmetic expression, e.g. '(2+3)*4'")


class CalculateResponse(BaseModel):
    """Successful evaluation result.

    Attributes:
        result: The value in compact general notation.
    """

    result: str = Field(..., description="Formatted result, e.g. '20' or '1e-05'")


class ErrorResponse(BaseModel):
    """Error payload returned for rejected or failed evaluations."""

    error: str


# Fixed client-facing messages.
INVALID_EXPRESSION_MESSAGE = "Expression is not valid"
INTERNAL_ERROR_MESSAGE = "Internal server error"
