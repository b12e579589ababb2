# hostelia/core/middleware.py
"""
Core middleware and exception handler registration for the FastAPI application.

This module provides request tracking, timing and error logging middleware,
plus the handlers that translate application exceptions into the standard
error envelope.
"""
from __future__ import annotations

import time
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from hostelia.core.constants import HEADER_PROCESS_TIME, HEADER_REQUEST_ID
from hostelia.core.exceptions import BaseAppException, ErrorCode
from hostelia.core.logging import get_logger, request_id as request_id_ctx
from hostelia.schemas.common.response import ErrorDetail, ErrorResponse

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique request ID to each incoming request.

    The request ID is:
    - Stored in request.state.request_id
    - Bound to the logging context for the duration of the request
    - Added to response headers as X-Request-ID
    """

    def __init__(self, app: ASGIApp, header_name: str = HEADER_REQUEST_ID):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Reuse an id forwarded by a proxy
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())

        request.state.request_id = request_id
        token = request_id_ctx.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_ctx.reset(token)

        response.headers[self.header_name] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that measures and logs request processing time.

    Adds X-Process-Time header to responses with the processing duration in seconds.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        response.headers[HEADER_PROCESS_TIME] = f"{process_time:.4f}"

        logger.info(
            "Request completed",
            extra={
                "request_id": getattr(request.state, "request_id", "unknown"),
                "method": request.method,
                "url": str(request.url.path),
                "query_params": str(request.url.query) if request.url.query else None,
                "status_code": response.status_code,
                "process_time": f"{process_time:.4f}s",
            }
        )

        return response


class ErrorLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs error responses and unhandled exceptions.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Request processing failed: {exc}",
                extra={
                    "request_id": getattr(request.state, "request_id", "unknown"),
                    "method": request.method,
                    "url": str(request.url.path),
                    "error_type": type(exc).__name__,
                },
                exc_info=True
            )
            raise

        if response.status_code >= 400:
            logger.warning(
                f"Request returned error status {response.status_code}",
                extra={
                    "request_id": getattr(request.state, "request_id", "unknown"),
                    "method": request.method,
                    "url": str(request.url.path),
                    "status_code": response.status_code,
                }
            )

        return response


def register_middlewares(app: FastAPI) -> None:
    """
    Register all core middlewares to the FastAPI application.

    Middlewares are registered in reverse order of execution (LIFO).
    The last middleware added is the first one to process the request.

    Execution order:
        1. RequestIDMiddleware (binds the request id first)
        2. ErrorLoggingMiddleware
        3. TimingMiddleware
    """
    app.add_middleware(TimingMiddleware)
    app.add_middleware(ErrorLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    logger.info(
        "Core middlewares registered successfully",
        extra={
            "middlewares": [
                "RequestIDMiddleware",
                "ErrorLoggingMiddleware",
                "TimingMiddleware",
            ],
        }
    )


def _error_response(
    request: Request,
    status_code: int,
    message: str,
    error_code: str,
    errors: Optional[List[ErrorDetail]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        error_code=error_code,
        errors=errors,
        timestamp=datetime.now(timezone.utc).isoformat(),
        path=str(request.url.path),
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump(exclude_none=True)),
    )


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    """Translate an application exception into the error envelope."""
    errors = None
    field_errors = exc.details.get("field_errors") if exc.details else None
    if field_errors:
        errors = [
            ErrorDetail(field=field, message=message, code=exc.error_code.value)
            for field, messages in field_errors.items()
            for message in messages
        ]

    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        f"{exc.__class__.__name__}: {exc.message}",
        extra={"error_code": exc.error_code.value, "status_code": exc.status_code},
    )
    return _error_response(request, exc.status_code, exc.message, exc.error_code.value, errors)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        errors.append(
            ErrorDetail(
                field=loc[-1] if loc else None,
                message=error.get("msg", "Invalid value"),
                code=error.get("type"),
                location=loc,
            )
        )
    return _error_response(
        request,
        422,
        "Request validation failed",
        ErrorCode.VALIDATION_ERROR.value,
        errors,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error: {exc}", exc_info=True)
    return _error_response(
        request,
        500,
        "Internal server error",
        ErrorCode.INTERNAL_ERROR.value,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error-envelope handlers on the application."""
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "RequestIDMiddleware",
    "TimingMiddleware",
    "ErrorLoggingMiddleware",
    "register_middlewares",
    "register_exception_handlers",
    "app_exception_handler",
]
