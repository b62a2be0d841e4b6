"""Fixtures running every storage test against both backends."""

from __future__ import annotations

from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel.pool import StaticPool

from pitchdeck_ai.core.database import create_all, create_sessionmaker
from pitchdeck_ai.storage import MemStorage, SqlStorage, Storage


@pytest_asyncio.fixture
async def sql_storage() -> AsyncGenerator[SqlStorage, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    try:
        yield SqlStorage(create_sessionmaker(engine))
    finally:
        await engine.dispose()


@pytest_asyncio.fixture(params=["memory", "sql"])
async def storage(request, sql_storage) -> AsyncGenerator[Storage, None]:
    if request.param == "memory":
        backend = MemStorage()
        yield backend
        await backend.close()
    else:
        yield sql_storage
