"""Error Handlers: global exception handlers for the mock API.

Invariants:
    - MockApiError → its own status with {"statusCode", "error", "message"}
    - RequestValidationError → 400 carrying the first violation only
    - HTTPException (unknown route, wrong method) → same envelope, same status
    - Exception (catch-all) → 500, never leaks internal details
    - Client errors log at INFO/WARNING; only the catch-all logs at ERROR

Design Decisions:
    - Four-layer handler: domain, request validation, routing, catch-all
    - One envelope for every error so clients parse a single shape
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mockapi.core.errors import ErrorSeverity, MockApiError, build_error_body
from mockapi.core.validation import describe_error

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register mock API domain error handler."""

    @app.exception_handler(MockApiError)
    async def domain_error_handler(request: Request, exc: MockApiError):
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{exc.code}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register FastAPI request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        errors = exc.errors()
        message = describe_error(_strip_location(errors[0])) if errors else "Invalid request"
        logger.warning(
            f"Validation error on {request.url.path}: {message}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_error_body(status.HTTP_400_BAD_REQUEST, message),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing/HTTP error handler (404 unknown route, 405 method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=build_error_body(exc.status_code, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_error_body(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "An internal server error occurred",
            ),
        )


def _strip_location(error: dict) -> dict:
    """Drop the FastAPI source prefix ("body", "path", ...) from loc."""
    loc = tuple(error.get("loc") or ())
    if loc and loc[0] in ("body", "path", "query", "header", "cookie"):
        loc = loc[1:]
    return {**error, "loc": loc}
