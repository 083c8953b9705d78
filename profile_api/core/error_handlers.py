import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from profile_api.core.errors import ApiError, ValidationError

logger = logging.getLogger(__name__)


def format_validation_error(exc: RequestValidationError) -> str:
    """First validation failure as '<location>: <message>', e.g. 'body.password: String should have at least 6 characters'."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def register_error_handlers(app: FastAPI, is_production: bool = False) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        else:
            logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = format_validation_error(exc)
        logger.warning("Validation error on %s: %s", request.url.path, message)
        error = ValidationError(message)
        return JSONResponse(status_code=error.status_code, content=error.to_response())

    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception: %s", exc)
        if is_production:
            return JSONResponse(status_code=500, content={"error": "Internal server error"})
        return JSONResponse(status_code=500, content={"error": str(exc)})
