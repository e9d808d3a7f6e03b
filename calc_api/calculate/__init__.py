"""Calculate endpoint - HTTP boundary around the expression evaluator."""

from .router import router
from .schemas import (
    INTERNAL_ERROR_MESSAGE,
    INVALID_EXPRESSION_MESSAGE,
    CalculateRequest,
    CalculateResponse,
    ErrorResponse,
)


__all__ = [
    "router",
    "CalculateRequest",
    "CalculateResponse",
    "ErrorResponse",
    "INVALID_EXPRESSION_MESSAGE",
    "INTERNAL_ERROR_MESSAGE",
]
