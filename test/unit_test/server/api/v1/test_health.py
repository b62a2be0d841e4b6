import pytest
from httpx import AsyncClient

# Mark all tests in this module as async
pytestmark = pytest.mark.asyncio


async def test_health_check(client: AsyncClient):
    response = await client.get("http://localhost/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_version(client: AsyncClient):
    response = await client.get("http://localhost/version")
    assert response.status_code == 200
    assert response.json() == {"version": "1.0.0", "schema_version": "v1"}


async def test_process_time_header(client: AsyncClient):
    response = await client.get("/health")
    assert float(response.headers["X-Process-Time"]) >= 0


async def test_llm_status(client: AsyncClient):
    response = await client.get("/api/status")
    assert response.status_code == 200
    assert response.json() == {
        "status": "connected",
        "provider": "fake",
        "models": [{"name": "fake-model", "size": 1024}],
    }


async def test_llm_status_disconnected_omits_models(client: AsyncClient, fake_provider, monkeypatch):
    from pitchdeck_ai.core.models.io.llm_status import ConnectionState, ProviderStatus

    async def disconnected():
        return ProviderStatus(status=ConnectionState.DISCONNECTED, provider="fake", error="Failed to connect")

    monkeypatch.setattr(fake_provider, "status", disconnected)

    response = await client.get("/api/status")
    assert response.json() == {"status": "disconnected", "provider": "fake", "error": "Failed to connect"}


async def test_surprise_prompt(client: AsyncClient):
    from pitchdeck_ai.llm.prompts import SURPRISE_PROMPTS

    response = await client.get("/api/prompts/surprise")
    assert response.status_code == 200
    assert response.json()["prompt"] in SURPRISE_PROMPTS
