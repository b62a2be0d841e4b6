from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from pitchdeck_ai.server.services.sessions import SessionStore
from pitchdeck_ai.storage import MemStorage


@pytest_asyncio.fixture
async def storage() -> AsyncGenerator[MemStorage, None]:
    backend = MemStorage()
    yield backend
    await backend.close()


@pytest.fixture
def session_store() -> SessionStore:
    return SessionStore()


@pytest_asyncio.fixture(name="client")
async def client_fixture(storage, session_store, fake_provider) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with in-memory storage and a scripted LLM provider."""
    from pitchdeck_ai.server.main import app
    from pitchdeck_ai.server.services.deps import get_llm_provider, get_storage
    from pitchdeck_ai.server.services.sessions import get_session_store

    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_llm_provider] = lambda: fake_provider
    app.dependency_overrides[get_session_store] = lambda: session_store

    # ASGITransport does not run the lifespan, so no backend is initialized here.
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False), base_url="http://localhost"
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def signed_in(client: AsyncClient):
    """Sign up ``alice`` and return ``(user, headers)``."""
    response = await client.post("/api/auth/signup", json={"username": "alice", "password": "s3cret"})
    assert response.status_code == 200
    body = response.json()
    return body["user"], {"Authorization": f"Bearer {body['sessionId']}"}
