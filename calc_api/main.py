import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .logging_config import configure_logging
from .middleware import MaxBodySizeMiddleware
from .calculate import INTERNAL_ERROR_MESSAGE, INVALID_EXPRESSION_MESSAGE
from .calculate import router as calculate_router
from .evaluator import EvaluationError

settings = get_settings()
configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

logger = structlog.get_logger("calc_api")

# Only the calculate route is exposed unless running in debug mode.
app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url=None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)
app.add_middleware(MaxBodySizeMiddleware, max_body_size=settings.MAX_BODY_BYTES)

app.include_router(calculate_router)


def invalid_expression_response() -> JSONResponse:
    return JSONResponse(status_code=422, content={"error": INVALID_EXPRESSION_MESSAGE})


def internal_error_response() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


@app.exception_handler(EvaluationError)
async def evaluation_exception_handler(request: Request, exc: EvaluationError):
    if not exc.is_user_error:
        logger.error("calculate_failed", kind=exc.kind.value, error=exc.message)
        return internal_error_response()
    logger.info("expression_rejected", kind=exc.kind.value, error=exc.message)
    return invalid_expression_response()


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Body is not JSON, not an object, or lacks a string "expression".
    logger.info("request_rejected", path=request.url.path, error_count=len(exc.errors()))
    return invalid_expression_response()


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return PlainTextResponse(
            "Method Not Allowed",
            status_code=405,
            headers=exc.headers,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("calculate_failed", path=request.url.path, error=str(exc), exc_info=exc)
    return internal_error_response()
