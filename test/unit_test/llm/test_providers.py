"""Unit tests for the Ollama and OpenRouter backends using httpx.MockTransport."""

import json

import httpx
import pytest

from pitchdeck_ai.core.models.io.llm_status import ConnectionState
from pitchdeck_ai.llm.errors import LLMConfigurationError, LLMProviderError
from pitchdeck_ai.llm.providers import OllamaProvider, OpenRouterProvider, build_llm_provider
from pitchdeck_ai.server.core.config import Settings

pytestmark = pytest.mark.asyncio

OLLAMA_URL = "http://mock-ollama"
OPENROUTER_URL = "http://mock-openrouter/api/v1"
MESSAGES = [{"role": "user", "content": "hello"}]


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestOllamaProvider:
    async def test_chat_posts_non_streaming_request(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"message": {"role": "assistant", "content": "  {\"a\": 1}\n"}})

        async with _client(handler) as client:
            provider = OllamaProvider(OLLAMA_URL, "llama3.2", client=client)
            reply = await provider.chat(MESSAGES)

        assert reply == '{"a": 1}'
        assert seen["url"] == f"{OLLAMA_URL}/api/chat"
        assert seen["body"] == {"model": "llama3.2", "messages": MESSAGES, "stream": False}

    async def test_chat_model_override(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["model"] = json.loads(request.content)["model"]
            return httpx.Response(200, json={"message": {"content": "x"}})

        async with _client(handler) as client:
            await OllamaProvider(OLLAMA_URL, client=client).chat(MESSAGES, model="mistral")

        assert seen["model"] == "mistral"

    async def test_chat_without_message_returns_empty_string(self):
        async with _client(lambda request: httpx.Response(200, json={"done": True})) as client:
            assert await OllamaProvider(OLLAMA_URL, client=client).chat(MESSAGES) == ""

    async def test_chat_http_error_raises_provider_error(self):
        async with _client(lambda request: httpx.Response(500, text="boom")) as client:
            with pytest.raises(LLMProviderError) as exc_info:
                await OllamaProvider(OLLAMA_URL, client=client).chat(MESSAGES)

        assert exc_info.value.message == "Ollama API error"
        assert exc_info.value.details == "HTTP 500"
        assert exc_info.value.status_code == 502

    async def test_chat_connection_error_raises_provider_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(LLMProviderError, match="Failed to connect to Ollama service"):
                await OllamaProvider(OLLAMA_URL, client=client).chat(MESSAGES)

    async def test_chat_non_json_body_raises_provider_error(self):
        async with _client(lambda request: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(LLMProviderError, match="non-JSON"):
                await OllamaProvider(OLLAMA_URL, client=client).chat(MESSAGES)

    async def test_status_lists_models(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/tags"
            return httpx.Response(200, json={"models": [{"name": "llama3.2", "size": 2019393189}, {"name": "phi3"}]})

        async with _client(handler) as client:
            status = await OllamaProvider(OLLAMA_URL, client=client).status()

        assert status.status == ConnectionState.CONNECTED
        assert status.provider == "ollama"
        assert [(m.name, m.size) for m in status.models] == [("llama3.2", 2019393189), ("phi3", None)]
        assert status.error is None

    async def test_status_reports_disconnected(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with _client(handler) as client:
            status = await OllamaProvider(OLLAMA_URL, client=client).status()

        assert status.status == ConnectionState.DISCONNECTED
        assert status.error == "Failed to connect to Ollama service"
        assert status.models is None

    @pytest.mark.parametrize("body", [["llama3.2"], "ok", None])
    async def test_status_non_object_body_is_disconnected(self, body):
        async with _client(lambda request: httpx.Response(200, json=body)) as client:
            status = await OllamaProvider(OLLAMA_URL, client=client).status()

        assert status.status == ConnectionState.DISCONNECTED
        assert status.error == "Unexpected response from Ollama service"

    async def test_status_ignores_malformed_model_list(self):
        async with _client(lambda request: httpx.Response(200, json={"models": None})) as client:
            status = await OllamaProvider(OLLAMA_URL, client=client).status()

        assert status.status == ConnectionState.CONNECTED
        assert status.models == []


class TestOpenRouterProvider:
    async def test_chat_sends_bearer_key_and_reads_first_choice(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"choices": [{"message": {"content": " hi "}}]})

        async with _client(handler) as client:
            provider = OpenRouterProvider("sk-test", "deepseek-chat", OPENROUTER_URL, client=client)
            reply = await provider.chat(MESSAGES)

        assert reply == "hi"
        assert seen["url"] == f"{OPENROUTER_URL}/chat/completions"
        assert seen["auth"] == "Bearer sk-test"
        assert seen["body"] == {"model": "deepseek-chat", "messages": MESSAGES}

    async def test_chat_without_choices_returns_empty_string(self):
        async with _client(lambda request: httpx.Response(200, json={"choices": []})) as client:
            provider = OpenRouterProvider("sk-test", base_url=OPENROUTER_URL, client=client)
            assert await provider.chat(MESSAGES) == ""

    async def test_chat_without_key_raises_configuration_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        async with _client(handler) as client:
            provider = OpenRouterProvider(None, base_url=OPENROUTER_URL, client=client)
            with pytest.raises(LLMConfigurationError, match="OPENROUTER_API_KEY not set"):
                await provider.chat(MESSAGES)

    async def test_chat_error_status_raises_provider_error(self):
        async with _client(lambda request: httpx.Response(401, json={"error": "bad key"})) as client:
            provider = OpenRouterProvider("sk-bad", base_url=OPENROUTER_URL, client=client)
            with pytest.raises(LLMProviderError) as exc_info:
                await provider.chat(MESSAGES)

        assert exc_info.value.message == "OpenRouter API error"
        assert exc_info.value.details == "HTTP 401"

    async def test_status_without_key_is_disconnected(self):
        status = await OpenRouterProvider(None, base_url=OPENROUTER_URL).status()

        assert status.status == ConnectionState.DISCONNECTED
        assert status.error == "OPENROUTER_API_KEY not set"

    async def test_status_lists_models(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/v1/models"
            return httpx.Response(200, json={"data": [{"id": "deepseek-chat"}, {"id": "gpt-4o"}]})

        async with _client(handler) as client:
            status = await OpenRouterProvider("sk-test", base_url=OPENROUTER_URL, client=client).status()

        assert status.status == ConnectionState.CONNECTED
        assert [m.name for m in status.models] == ["deepseek-chat", "gpt-4o"]

    async def test_status_error_is_disconnected(self):
        async with _client(lambda request: httpx.Response(503)) as client:
            status = await OpenRouterProvider("sk-test", base_url=OPENROUTER_URL, client=client).status()

        assert status.status == ConnectionState.DISCONNECTED
        assert status.error == "Failed to connect to OpenRouter"

    @pytest.mark.parametrize("body", [[{"id": "gpt-4o"}], "ok", None])
    async def test_status_non_object_body_is_disconnected(self, body):
        async with _client(lambda request: httpx.Response(200, json=body)) as client:
            status = await OpenRouterProvider("sk-test", base_url=OPENROUTER_URL, client=client).status()

        assert status.status == ConnectionState.DISCONNECTED
        assert status.error == "Unexpected response from OpenRouter"


class TestBuildLLMProvider:
    async def test_builds_ollama(self):
        settings = Settings(LLM_PROVIDER="ollama", OLLAMA_BASE_URL="http://mock-ollama/", OLLAMA_MODEL="phi3")
        provider = build_llm_provider(settings)
        try:
            assert isinstance(provider, OllamaProvider)
            assert provider.base_url == "http://mock-ollama"
            assert provider.model == "phi3"
        finally:
            await provider.aclose()

    async def test_builds_openrouter(self):
        settings = Settings(LLM_PROVIDER="openrouter", OPENROUTER_API_KEY="sk-x", OPENROUTER_MODEL="gpt-4o")
        provider = build_llm_provider(settings)
        try:
            assert isinstance(provider, OpenRouterProvider)
            assert provider.api_key == "sk-x"
            assert provider.model == "gpt-4o"
        finally:
            await provider.aclose()

    async def test_injected_client_is_not_closed(self):
        client = httpx.AsyncClient()
        provider = build_llm_provider(Settings(LLM_PROVIDER="ollama"), client=client)
        await provider.aclose()
        assert not client.is_closed
        await client.aclose()
