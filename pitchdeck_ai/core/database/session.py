"""
Global database session and engine management.

This module manages the process-wide AsyncEngine and async_sessionmaker used
when ``STORAGE_BACKEND=database``. Both are created on first use so that the
in-memory backend never opens a database connection.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from pitchdeck_ai.core.logging_config import get_logger
from pitchdeck_ai.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

_engine: Optional[AsyncEngine] = None
_session_maker: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """Return the global engine, creating it from ``settings.database_url`` on first call."""
    global _engine
    if _engine is None:
        _engine = create_engine(settings.database_url)
    return _engine


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Return the global session factory bound to :func:`get_engine`."""
    global _session_maker
    if _session_maker is None:
        _session_maker = create_sessionmaker(get_engine())
    return _session_maker


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with get_session_maker()() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Creates all tables that do not exist yet. Production deployments run the
    Alembic migration instead; running both is harmless.
    """
    await create_all(get_engine())
    logger.info("Database tables ensured")


async def dispose_engine() -> None:
    """Dispose the global engine, if one was created."""
    global _engine, _session_maker
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_maker = None
