"""Error Handlers — global exception handlers for the Formalisms API.

Invariants:
    - FormalismsError → its own to_response() envelope and http_status
    - RequestValidationError → 400 VALIDATION_ERROR with field-level details
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details
    - Every envelope has the same keys: code, message, category, severity

Design Decisions:
    - Three-layer handler: domain, validation (Pydantic), catch-all
    - Non-domain envelopes built by one helper so harnesses parse a single shape
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from formalisms.core.errors import ErrorCategory, ErrorSeverity, FormalismsError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(FormalismsError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **extra,
) -> dict:
    error = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    error.update(extra)
    return {"error": error}


async def _handle_domain_error(request: Request, exc: FormalismsError):
    """Unknown operation/case, bad arguments, arithmetic error."""
    logger.warning(
        f"FormalismsError: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "module_name": exc.context.module,
            "operation": exc.context.operation,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    """Malformed request body or path/query parameters."""
    logger.warning(
        f"Validation error on {request.url.path}: {exc.errors()}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def _handle_unexpected_error(request: Request, exc: Exception):
    """Catch-all — never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )
