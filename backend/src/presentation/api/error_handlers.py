"""
Global exception handlers.

- ValidationError -> 422 with the violated rule as message
- NotFoundError -> 404
- anything else -> 500 without internal details
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from domain.exceptions import NotFoundError, ValidationError
from infrastructure.config import build_error_context, get_context, get_logger
from presentation.schemas import ErrorResponse

logger = get_logger("http")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation failed", {"message": str(exc)})
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "validation_error", str(exc))

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(request: Request, exc: NotFoundError):
        logger.warning("Resource not found", {
            "entity": exc.entity_name,
            "entity_id": exc.entity_id,
        })
        return _error_response(status.HTTP_404_NOT_FOUND, "not_found", str(exc))

    # Last resort for failures raised outside the request context middleware
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        return internal_error_response(exc)


def internal_error_response(exc: Exception) -> JSONResponse:
    """Log an unhandled exception and build the generic 500 response."""
    logger.error("Unhandled exception", build_error_context(exc))
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "Internal server error",
    )


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(
        error=error,
        message=message,
        request_id=get_context().get("request_id"),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())
