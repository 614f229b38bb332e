"""
Error handling: maps domain errors, HTTP errors and validation errors to
a uniform JSON envelope, and hides internal failures behind a generic 500.
"""
import hashlib
import json
import logging
import sys
import time
import traceback
from typing import Any, Dict, List, Optional, Union

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.services.exceptions import AuthenticationError, MetaverseError

logger = logging.getLogger("api.middleware.error_handler")

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorDetail:
    """Standardized error body."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error_type: str,
        details: Optional[Union[Dict[str, Any], List[Any]]] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.error_type = error_type
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        error_dict = {
            "status_code": self.status_code,
            "message": self.message,
            "error_type": self.error_type,
        }
        if self.details:
            error_dict["details"] = self.details
        return error_dict

    def to_response(self, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code,
            content=jsonable_encoder(self.to_dict()),
            headers=headers,
        )


def _error_id(request: Request) -> str:
    return hashlib.md5(f"{time.time()}-{request.url.path}".encode()).hexdigest()[:8]


def _auth_headers(exc: MetaverseError) -> Optional[Dict[str, str]]:
    """Challenge header for 401 responses."""
    if isinstance(exc, AuthenticationError) and exc.status_code == 401:
        return {"WWW-Authenticate": "Bearer"}
    return None


def format_stack_trace(stack_trace: str) -> str:
    """Indent a stack trace for the log."""
    return "\n".join(f"  │ {line}" for line in stack_trace.split("\n") if line.strip())


def _log_unhandled(request: Request, exc: Exception) -> None:
    stack_trace = "".join(traceback.format_exception(*sys.exc_info()))
    logger.error(
        f"EXC#{_error_id(request)}: {request.method} {request.url.path} - "
        f"{exc.__class__.__name__}: {exc}\n"
        f"╭─ Stack Trace ─────────────────────────╮\n"
        f"{format_stack_trace(stack_trace)}\n"
        f"╰───────────────────────────────────────╯"
    )


def _internal_error() -> JSONResponse:
    return ErrorDetail(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=INTERNAL_ERROR_MESSAGE,
        error_type="internal_error",
    ).to_response()


async def error_handler_middleware(request: Request, call_next):
    """
    Catch exceptions that escaped the exception handlers.

    The full trace is logged; the client only sees a generic 500.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        _log_unhandled(request, exc)
        return _internal_error()


def setup_error_handlers(app):
    """
    Register the exception handlers on the FastAPI application.
    """

    @app.exception_handler(MetaverseError)
    async def domain_exception_handler(request: Request, exc: MetaverseError):
        """Handler for domain errors raised by the services."""
        logger.warning(
            f"{exc.error_type.upper()}: {request.method} {request.url.path} - "
            f"{exc.status_code} - {exc.message}"
        )
        return ErrorDetail(
            status_code=exc.status_code,
            message=exc.message,
            error_type=exc.error_type,
        ).to_response(headers=_auth_headers(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handler for HTTP exceptions (unknown routes, wrong methods)."""
        logger.warning(f"HTTP#{_error_id(request)}: {exc.status_code} - {exc.detail}")
        return ErrorDetail(
            status_code=exc.status_code,
            message=str(exc.detail),
            error_type="http_exception",
        ).to_response(headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handler for request body validation errors, reported as 400."""
        validation_errors = exc.errors()
        logger.warning(
            f"VALID#{_error_id(request)}: validation error on {request.method} {request.url.path}\n"
            f"  │ {json.dumps(jsonable_encoder(validation_errors), indent=2)}"
        )
        return ErrorDetail(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Invalid request data",
            error_type="validation_error",
            details=validation_errors,
        ).to_response()

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Handler for unhandled exceptions; no internal detail is returned."""
        _log_unhandled(request, exc)
        return _internal_error()
