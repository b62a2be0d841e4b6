"""
Exception Handlers for the FastAPI Application.

This module maps domain exceptions to HTTP responses and provides a global
handler that catches all unhandled exceptions and logs detailed information
including error ID, request context, and full traceback for debugging.
"""

import traceback
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pitchdeck_ai.core.logging_config import get_logger
from pitchdeck_ai.core.monitoring import log_error
from pitchdeck_ai.llm.errors import LLMError
from pitchdeck_ai.server.services.usage import UsageLimitExceeded

logger = get_logger(__name__)


async def llm_exception_handler(request: Request, exc: LLMError) -> JSONResponse:
    """
    Render LLM failures as ``{"error", "details"}``.

    Parse and validation problems answer 500; an unreachable backend 502.
    """
    logger.error(f"LLM error in {request.method} {request.url.path}: {exc.message} ({exc.details})")
    content = {"error": exc.message}
    if exc.details is not None:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


async def usage_limit_exception_handler(request: Request, exc: UsageLimitExceeded) -> JSONResponse:
    logger.info(f"Usage limit hit in {request.url.path}: tier={exc.tier}, action={exc.action.value}")
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = uuid.uuid4().hex[:12]

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        },
    )
    log_error(type(exc).__name__, str(exc), context={"error_id": error_id, "path": request.url.path})

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(LLMError, llm_exception_handler)
    app.add_exception_handler(UsageLimitExceeded, usage_limit_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
