"""Unit tests for engine helpers and the global session management."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from sqlalchemy import inspect

from pitchdeck_ai.core.database import session as db_session
from pitchdeck_ai.core.database import create_engine


class TestCreateEngine:
    @pytest.mark.parametrize(
        "url",
        [
            "postgres://user:pw@db:5432/app",
            "postgresql://user:pw@db:5432/app",
            "postgresql+psycopg://user:pw@db:5432/app",
            "postgresql+asyncpg://user:pw@db:5432/app",
        ],
    )
    def test_postgres_urls_use_asyncpg(self, url):
        engine = create_engine(url)

        assert engine.url.drivername == "postgresql+asyncpg"
        assert engine.url.database == "app"

    def test_sqlite_url_passes_through(self):
        engine = create_engine("sqlite+aiosqlite:///:memory:")

        assert engine.url.drivername == "sqlite+aiosqlite"


@pytest.mark.asyncio
async def test_create_all_builds_both_tables(in_memory_engine):
    async with in_memory_engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    assert {"users", "pitch_decks"} <= set(tables)


class TestGlobalSession:
    @pytest.fixture(autouse=True)
    def _reset_globals(self):
        with patch.object(db_session, "_engine", None), patch.object(db_session, "_session_maker", None):
            yield

    def test_engine_and_sessionmaker_are_cached(self):
        with patch.object(db_session.settings, "database_url", "sqlite+aiosqlite:///:memory:"):
            engine = db_session.get_engine()
            maker = db_session.get_session_maker()

            assert db_session.get_engine() is engine
            assert db_session.get_session_maker() is maker

    @pytest.mark.asyncio
    async def test_init_db_then_dispose(self):
        with patch.object(db_session.settings, "database_url", "sqlite+aiosqlite:///:memory:"):
            await db_session.init_db()
            async for session in db_session.get_session():
                assert session.bind is db_session.get_engine()

            await db_session.dispose_engine()

        assert db_session._engine is None
        assert db_session._session_maker is None

    @pytest.mark.asyncio
    async def test_dispose_without_engine_is_noop(self):
        await db_session.dispose_engine()

        assert db_session._engine is None
