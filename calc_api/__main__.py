"""Run the calculation service with uvicorn."""

import structlog
import uvicorn

from .config import get_settings
from .logging_config import configure_logging


def main() -> None:
    """Start the API server on the configured host and port."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    logger = structlog.get_logger("calc_api")
    logger.info("server_starting", url=f"http://{settings.HOST}:{settings.PORT}")

    uvicorn.run(
        "calc_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
