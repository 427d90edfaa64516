"""
Error types and JSON error handlers.
"""
import logging
from typing import List, Sequence

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from webhook_api.core.clock import to_iso

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when an inbound webhook payload is missing required fields."""

    def __init__(self, message: str, missing_fields: Sequence[str] = ()):
        super().__init__(message)
        self.message = message
        self.missing_fields: List[str] = list(missing_fields)

    @classmethod
    def for_missing(cls, missing_fields: Sequence[str]) -> "ValidationError":
        return cls(f"Missing required fields: {', '.join(missing_fields)}", missing_fields)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unmatched routes and methods answer with the same 404 body."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "success": False,
                "error": "Endpoint not found",
                "path": request.url.path,
                "method": request.method,
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"🚨 Server Error on {request.method} {request.url.path}: {exc}")
    clock = request.app.state.clock
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "Internal server error",
            "timestamp": to_iso(clock()),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
