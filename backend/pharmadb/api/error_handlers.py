"""Error Handlers — global exception handlers for the PharmaDB API.

Invariants:
    - PharmaError → structured JSON with error code, message, severity
    - RequestValidationError → 400 CONSTRAINT_VIOLATION naming every offending field,
      the same envelope the store's CHECK/UNIQUE rejections produce
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (PharmaError), validation (Pydantic), catch-all (Exception)
    - Body violations reuse ConstraintViolationError: one code for boundary and store rejections
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from pharmadb.core.errors import (
    ConstraintViolationError, ErrorContext, ErrorSeverity, PharmaError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_pharma_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_pharma_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(PharmaError)
    async def pharma_error_handler(request: Request, exc: PharmaError):
        """Handle all PharmaDB domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"PharmaError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Render body/path/query violations as a ConstraintViolation."""
        error = _constraint_violation(exc)
        logger.info(
            f"Request rejected on {request.url.path}: {error.message}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        body = error.to_response()
        body["error"]["details"] = error.context.debug_info["fields"]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=body,
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
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _field_name(loc: tuple) -> str:
    """("body", "price") -> "price"; path and query locations keep their prefix."""
    parts = [str(part) for part in loc]
    if parts and parts[0] == "body":
        parts = parts[1:]
    return ".".join(parts) or "body"


def _constraint_violation(exc: RequestValidationError) -> ConstraintViolationError:
    fields = [
        {"field": _field_name(e["loc"]), "message": e["msg"], "type": e["type"]}
        for e in exc.errors()
    ]
    names = ", ".join(sorted({f["field"] for f in fields}))
    return ConstraintViolationError(
        f"invalid value for {names}",
        ErrorContext(debug_info={"fields": fields}),
    )
