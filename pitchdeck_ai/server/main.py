"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request logging), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pitchdeck_ai.core.logging_config import get_logger, setup_logging
from pitchdeck_ai.core.monitoring import initialize_logfire

from .api.v1 import auth, decks, generation, health, prompts, status, usage
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware
from .services.deps import close_singletons

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    On startup, creates missing tables when the database backend is selected.
    On shutdown, closes the LLM client and disposes the database engine.
    """
    logger.info(
        f"Starting up {constant.PROJECT_NAME} Server "
        f"(llm={settings.llm_provider}, storage={settings.storage_backend})..."
    )
    if settings.storage_backend == "database":
        from pitchdeck_ai.core.database import init_db

        try:
            await init_db()
            logger.info("Database initialized successfully")
        except Exception as e:
            logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME} Server...")
    await close_singletons()
    if settings.storage_backend == "database":
        from pitchdeck_ai.core.database import dispose_engine

        await dispose_engine()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    PitchDeck-AI Server API

    Turns a short business idea into a structured startup pitch deck or a business
    validation report using a large language model (Ollama or OpenRouter).
    It also manages accounts, sessions, usage quotas and saved pitch decks.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

initialize_logfire(app)
setup_exception_handlers(app)

app.add_middleware(RequestLoggingMiddleware, slow_request_ms=settings.slow_request_ms)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)


app.include_router(health.router, tags=["health"])
app.include_router(status.router, prefix=constant.API_PREFIX, tags=["status"])
app.include_router(auth.router, prefix=f"{constant.API_PREFIX}/auth", tags=["auth"])
app.include_router(generation.router, prefix=constant.API_PREFIX, tags=["generation"])
app.include_router(decks.router, prefix=f"{constant.API_PREFIX}/decks", tags=["decks"])
app.include_router(usage.router, prefix=f"{constant.API_PREFIX}/usage", tags=["usage"])
app.include_router(prompts.router, prefix=f"{constant.API_PREFIX}/prompts", tags=["prompts"])
