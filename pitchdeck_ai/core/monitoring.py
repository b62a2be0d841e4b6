"""
Monitoring and Tracing Configuration Module.

This module provides optional integration with Pydantic Logfire for tracing
API requests and LLM calls. Everything here is a no-op unless
``LOGFIRE_ENABLED`` is true and a ``LOGFIRE_TOKEN`` is configured; in every
case the regular application logger still receives the event.
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI

logger = logging.getLogger(__name__)

# Logfire configuration from environment
LOGFIRE_ENABLED = os.getenv("LOGFIRE_ENABLED", "false").lower() in ("true", "1", "yes")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "pitchdeck-ai-server")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "0.1.0")

# Feature flags
LOGFIRE_TRACE_SQLALCHEMY = os.getenv("LOGFIRE_TRACE_SQLALCHEMY", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_HTTPX = os.getenv("LOGFIRE_TRACE_HTTPX", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_FASTAPI = os.getenv("LOGFIRE_TRACE_FASTAPI", "true").lower() in ("true", "1", "yes")

_logfire_active = False


def initialize_logfire(app: Optional[FastAPI] = None) -> bool:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    Instruments SQLAlchemy, HTTPX (the LLM calls) and, when ``app`` is given,
    the FastAPI endpoints.

    Args:
        app: FastAPI application instance for FastAPI instrumentation (optional).

    Returns:
        True when Logfire was configured, False otherwise.
    """
    global _logfire_active

    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not LOGFIRE_TOKEN:
        logger.warning("Logfire is enabled but LOGFIRE_TOKEN is not set. Monitoring will not work.")
        return False

    import logfire

    try:
        logfire.configure(
            token=LOGFIRE_TOKEN,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
        )
        if LOGFIRE_TRACE_SQLALCHEMY:
            logfire.instrument_sqlalchemy()
        if LOGFIRE_TRACE_HTTPX:
            logfire.instrument_httpx()
        if LOGFIRE_TRACE_FASTAPI and app is not None:
            logfire.instrument_fastapi(app=app)
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False

    _logfire_active = True
    logger.info(f"Logfire monitoring initialized: environment={LOGFIRE_ENVIRONMENT}, service={LOGFIRE_SERVICE_NAME}")
    return True


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    logger.debug(f"{method} {path} -> {status_code} ({duration_ms:.2f}ms)")
    if not _logfire_active:
        return

    import logfire

    logfire.info(
        "API request completed",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
    )


def log_llm_call(provider: str, model: str, duration_ms: float, ok: bool = True) -> None:
    """
    Log an LLM call with latency.

    Args:
        provider: The backend name (``ollama`` or ``openrouter``)
        model: The model name
        duration_ms: Call duration in milliseconds
        ok: Whether the call returned a usable response
    """
    logger.info(f"LLM call provider={provider} model={model} ok={ok} duration_ms={duration_ms:.2f}")
    if not _logfire_active:
        return

    import logfire

    logfire.info("LLM call completed", provider=provider, model=model, duration_ms=duration_ms, ok=ok)


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Log an error with context for debugging.

    Args:
        error_type: Type of error
        error_message: Error message
        context: Additional context dictionary
    """
    logger.debug(f"{error_type}: {error_message}")
    if not _logfire_active:
        return

    import logfire

    logfire.error(
        "{error_type}: {error_message}",
        error_type=error_type,
        error_message=error_message,
        **(context or {}),
    )
