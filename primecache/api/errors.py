"""
API error handling and exception mapping.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from primecache.domain.exceptions import DomainError, InvalidArgumentError
from primecache.infra.config.logging_config import get_logger

logger = get_logger("api.errors")


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Convert domain errors into JSON error responses."""
    status_code = (
        status.HTTP_400_BAD_REQUEST
        if isinstance(exc, InvalidArgumentError)
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    logger.info("api.domain_error", code=exc.code, error=exc.message, path=request.url.path)
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


def setup_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
