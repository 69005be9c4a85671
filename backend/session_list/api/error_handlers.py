"""Error Handlers — map exceptions escaping a route to the REST error envelope.

Invariants:
    - SessionListError → its own http_status and to_response() body
    - RequestValidationError → 400 with one detail entry per failing field
    - Any other exception → 500 with a fixed message (no internals leaked)
    - Every body has the {"error": {code, message, category, severity}} shape

Design Decisions:
    - Handlers are plain module functions registered with add_exception_handler:
      tests mount them on a bare FastAPI app without importing main
    - Domain errors are logged at warning when 4xx and at error when 5xx
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from session_list.core.errors import (
    ErrorCategory, ErrorSeverity, SessionListError, error_envelope,
)

logger = logging.getLogger(__name__)


async def handle_session_list_error(request: Request, exc: SessionListError) -> JSONResponse:
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level,
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "session_id": exc.context.session_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    logger.warning(
        f"Rejected request on {request.url.path}: {len(details)} invalid field(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the three handlers, most specific first."""
    app.add_exception_handler(SessionListError, handle_session_list_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
