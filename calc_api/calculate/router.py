"""FastAPI router for the calculate endpoint."""

from anyio.to_thread import run_sync
from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from calc_api.evaluator import calc, format_result

from .schemas import CalculateRequest, CalculateResponse, ErrorResponse


router = APIRouter(prefix="/api/v1", tags=["calculate"])


async def parse_calculate_request(request: Request) -> CalculateRequest:
    """Decode the body as JSON regardless of its Content-Type.

    Raises:
        RequestValidationError: If the body is not a JSON object with a
            string ``expression``.
    """
    body = await request.body()
    try:
        return CalculateRequest.model_validate_json(body)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(), body=body) from exc


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    responses={
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": CalculateRequest.model_json_schema()}},
        }
    },
)
async def calculate(request: Request) -> CalculateResponse:
    """Evaluate an arithmetic expression.

    Evaluation runs on a worker thread. Failures propagate as
    ``EvaluationError`` and are mapped to status codes by the app's
    exception handlers.

    Args:
        request: Incoming request whose body carries the expression.

    Returns:
        The formatted result.
    """
    payload = await parse_calculate_request(request)
    result = await run_sync(calc, payload.expression)
    return CalculateResponse(result=format_result(result))
