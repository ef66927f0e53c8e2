"""Error Handlers — global exception handlers for the Landing API.

Invariants:
    - LandingError → its own status and to_response() body ({message, field?})
    - RequestValidationError (malformed JSON) → 400 {message, field?}
    - Exception (catch-all) → 500 {message}, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (LandingError), validation (FastAPI), catch-all (Exception)
    - Log level follows severity: conflicts and bad input are routine, not errors
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import LandingError, ErrorSeverity

logger = logging.getLogger(__name__)

INTERNAL_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_landing_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_landing_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(LandingError)
    async def landing_error_handler(request: Request, exc: LandingError):
        """Handle all Landing API domain/infrastructure errors."""
        level = (
            logging.ERROR if exc.severity == ErrorSeverity.CRITICAL
            else logging.INFO
        )
        logger.log(
            level, f"{type(exc).__name__}: {exc.message}",
            exc_info=exc.severity == ErrorSeverity.CRITICAL,
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request parsing errors (e.g. malformed JSON)."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_MESSAGE},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build {message, field?} from the first validation error."""
    errors = exc.errors()
    if not errors:
        return {"message": "Invalid request data"}
    first = errors[0]
    # loc starts with "body"; integer positions point into malformed JSON
    parts = [str(p) for p in first.get("loc", ())[1:] if isinstance(p, str)]
    body = {"message": first.get("msg") or "Invalid request data"}
    if parts:
        body["field"] = ".".join(parts)
    return body
