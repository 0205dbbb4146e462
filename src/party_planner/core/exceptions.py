"""Domain errors and the exception handlers that render them as envelopes.

Every failure leaves the API as::

    {"success": false, "response": "<message>", "error": "<code>", "request_id": "..."}

The message stays human readable and generic; ``error`` is the stable,
machine-readable code clients branch on.
"""

from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.party_planner.core.logging import get_logger

logger = get_logger(__name__)


class PlannerError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "internal_error"
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, error_code: str | None = None):
        self.message = message or self.default_message
        if error_code is not None:
            self.error_code = error_code
        super().__init__(self.message)


class ValidationFailed(PlannerError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"
    default_message = "Invalid request"


class AuthenticationFailed(PlannerError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "unauthenticated"
    default_message = "Please log in"


class NotFound(PlannerError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"
    default_message = "Not found"


class Conflict(PlannerError):
    status_code = status.HTTP_409_CONFLICT
    error_code = "conflict"
    default_message = "Conflict"


class StoreUnavailable(PlannerError):
    error_code = "store_unavailable"
    default_message = "Service unavailable, please try again"


_HTTP_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "validation_error",
    status.HTTP_401_UNAUTHORIZED: "unauthenticated",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
    status.HTTP_409_CONFLICT: "conflict",
    status.HTTP_429_TOO_MANY_REQUESTS: "rate_limited",
}


def error_envelope(status_code: int, message: Any, error_code: str) -> JSONResponse:
    """Build the failure envelope, tagged with the current request id."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "response": message,
            "error": error_code,
            "request_id": correlation_id.get(),
        },
    )


def _format_validation_error(exc: RequestValidationError) -> str:
    """Reduce pydantic's error list to the first problem, e.g. ``name: too short``."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    msg = str(first.get("msg", "Invalid value")).removeprefix("Value error, ")
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    if loc:
        return f"{'.'.join(loc)}: {msg}"
    return msg


def setup_exception_handlers(app: FastAPI) -> None:
    """Render every error as the response envelope with the request_id attached."""

    @app.exception_handler(PlannerError)
    async def planner_error_handler(request: Request, exc: PlannerError) -> JSONResponse:
        if isinstance(exc, StoreUnavailable):
            logger.error("Store unavailable", path=request.url.path, error=exc.message)
        return error_envelope(exc.status_code, exc.message, exc.error_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_envelope(
            status.HTTP_400_BAD_REQUEST,
            _format_validation_error(exc),
            "validation_error",
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_envelope(
            exc.status_code, exc.detail, _HTTP_ERROR_CODES.get(exc.status_code, "http_error")
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return error_envelope(
            exc.status_code, exc.detail, _HTTP_ERROR_CODES.get(exc.status_code, "http_error")
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        return error_envelope(
            status.HTTP_429_TOO_MANY_REQUESTS,
            f"Rate limit exceeded: {exc.detail}",
            "rate_limited",
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception("Store error", path=request.url.path, exc_info=exc)
        return error_envelope(
            StoreUnavailable.status_code,
            StoreUnavailable.default_message,
            StoreUnavailable.error_code,
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=correlation_id.get(),
            path=request.url.path,
        )
        return error_envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            "internal_error",
        )
