"""Error Handlers — global exception handlers for the local FastAPI server.

Invariants:
    - Any unexpected exception → 500 with the INTERNAL_ERROR envelope
    - Never leaks internal details or request content

Design Decisions:
    - dispatch() already converts handler failures; this is the outer catch-all
      for failures in the FastAPI layer itself
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pii_service.core.errors import ErrorCode, INTERNAL_ERROR_MESSAGE, make_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_generic_error_handler(app)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled {type(exc).__name__} in {request.method} request",
            extra={"error_code": ErrorCode.INTERNAL_ERROR.value},
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_build_internal_error_response(),
        )


def _build_internal_error_response() -> dict:
    envelope = make_error(ErrorCode.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)
    return {"error": envelope.to_dict()}
