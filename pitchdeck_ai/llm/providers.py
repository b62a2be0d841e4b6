"""LLM backends.

Overview
--------
Two interchangeable chat backends sit behind :class:`LLMProvider`:

- :class:`OllamaProvider` talks to a self-hosted Ollama server
  (``POST /api/chat`` with ``stream: false``; models from ``GET /api/tags``).
- :class:`OpenRouterProvider` talks to the OpenRouter chat-completions API
  (``POST /chat/completions`` with a Bearer key; models from ``GET /models``).

Both return the assistant message text unchanged apart from surrounding
whitespace; turning that text into structured data is the job of
:mod:`pitchdeck_ai.llm.extraction`.

Errors
------
Transport failures and non-2xx answers are raised as
:class:`~pitchdeck_ai.llm.errors.LLMProviderError`. A missing OpenRouter key
is raised as :class:`~pitchdeck_ai.llm.errors.LLMConfigurationError` at call
time so that the server can still start and report its status.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

import httpx

from pitchdeck_ai.core.logging_config import get_logger
from pitchdeck_ai.core.models.io.llm_status import ConnectionState, ModelInfo, ProviderStatus
from pitchdeck_ai.core.monitoring import log_llm_call
from pitchdeck_ai.server.core.config import Settings

from .errors import LLMConfigurationError, LLMProviderError

logger = get_logger(__name__)


def _entries(data: Any, key: str) -> Optional[List[Dict[str, Any]]]:
    """Return the dict items under ``data[key]``, or None when the body is not a JSON object."""
    if not isinstance(data, dict):
        return None
    items = data.get(key)
    if not isinstance(items, list):
        return []
    return [m for m in items if isinstance(m, dict)]


class LLMProvider(ABC):
    """Common interface for chat-completion backends.

    Subclasses own an ``httpx.AsyncClient`` unless one is injected, in which
    case closing it stays the caller's responsibility.
    """

    name: str = "llm"
    display_name: str = "LLM"

    def __init__(self, *, model: str, timeout: float = 120.0, client: Optional[httpx.AsyncClient] = None) -> None:
        self.model = model
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @abstractmethod
    async def chat(self, messages: Sequence[Dict[str, str]], model: Optional[str] = None) -> str:
        """Send chat messages and return the assistant's reply text.

        Args:
            messages: ``{"role", "content"}`` dicts.
            model: Model override; the provider default is used when omitted.
        """

    @abstractmethod
    async def status(self) -> ProviderStatus:
        """Probe the backend and report whether it is usable."""

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _post_json(self, url: str, payload: Dict[str, Any], headers: Optional[Dict[str, str]] = None) -> Any:
        model = payload.get("model", self.model)
        start = time.perf_counter()
        try:
            response = await self._client.post(url, json=payload, headers=headers)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            log_llm_call(self.name, model, (time.perf_counter() - start) * 1000, ok=False)
            logger.error(f"{self.name} returned HTTP {e.response.status_code}: {e.response.text[:500]}")
            raise LLMProviderError(
                f"{self.display_name} API error",
                details=f"HTTP {e.response.status_code}",
            ) from e
        except httpx.HTTPError as e:
            log_llm_call(self.name, model, (time.perf_counter() - start) * 1000, ok=False)
            logger.error(f"Failed to reach {self.name} at {url}: {e}")
            raise LLMProviderError(f"Failed to connect to {self.display_name} service", details=str(e)) from e
        except ValueError as e:
            log_llm_call(self.name, model, (time.perf_counter() - start) * 1000, ok=False)
            raise LLMProviderError(f"{self.display_name} returned a non-JSON response", details=str(e)) from e

        log_llm_call(self.name, model, (time.perf_counter() - start) * 1000, ok=True)
        return data


class OllamaProvider(LLMProvider):
    """Chat backend for a self-hosted Ollama server."""

    name = "ollama"
    display_name = "Ollama"

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        model: str = "llama3.2",
        *,
        timeout: float = 120.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(model=model, timeout=timeout, client=client)
        self.base_url = base_url.rstrip("/")

    async def chat(self, messages: Sequence[Dict[str, str]], model: Optional[str] = None) -> str:
        payload = {
            "model": model or self.model,
            "messages": list(messages),
            "stream": False,
        }
        data = await self._post_json(f"{self.base_url}/api/chat", payload)
        message = data.get("message") if isinstance(data, dict) else None
        if not isinstance(message, dict):
            return ""
        return (message.get("content") or "").strip()

    async def status(self) -> ProviderStatus:
        try:
            response = await self._client.get(f"{self.base_url}/api/tags")
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Ollama status check failed: {e}")
            return ProviderStatus(
                status=ConnectionState.DISCONNECTED,
                provider=self.name,
                error="Failed to connect to Ollama service",
            )

        entries = _entries(data, "models")
        if entries is None:
            logger.warning(f"Ollama status returned an unexpected body: {type(data).__name__}")
            return ProviderStatus(
                status=ConnectionState.DISCONNECTED,
                provider=self.name,
                error="Unexpected response from Ollama service",
            )

        models: List[ModelInfo] = [ModelInfo(name=m.get("name", ""), size=m.get("size")) for m in entries]
        return ProviderStatus(status=ConnectionState.CONNECTED, provider=self.name, models=models)


class OpenRouterProvider(LLMProvider):
    """Chat backend for the OpenRouter API."""

    name = "openrouter"
    display_name = "OpenRouter"

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "deepseek-chat",
        base_url: str = "https://openrouter.ai/api/v1",
        *,
        timeout: float = 120.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(model=model, timeout=timeout, client=client)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    def _headers(self) -> Dict[str, str]:
        if not self.api_key:
            raise LLMConfigurationError("OPENROUTER_API_KEY not set", details="Configure an OpenRouter API key.")
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def chat(self, messages: Sequence[Dict[str, str]], model: Optional[str] = None) -> str:
        headers = self._headers()
        payload = {"model": model or self.model, "messages": list(messages)}
        data = await self._post_json(f"{self.base_url}/chat/completions", payload, headers=headers)

        # A reply without choices yields "" and fails later at JSON extraction.
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None
        return (content or "").strip()

    async def status(self) -> ProviderStatus:
        if not self.api_key:
            return ProviderStatus(
                status=ConnectionState.DISCONNECTED,
                provider=self.name,
                error="OPENROUTER_API_KEY not set",
            )
        try:
            response = await self._client.get(f"{self.base_url}/models", headers=self._headers())
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"OpenRouter status check failed: {e}")
            return ProviderStatus(
                status=ConnectionState.DISCONNECTED,
                provider=self.name,
                error="Failed to connect to OpenRouter",
            )

        entries = _entries(data, "data")
        if entries is None:
            logger.warning(f"OpenRouter status returned an unexpected body: {type(data).__name__}")
            return ProviderStatus(
                status=ConnectionState.DISCONNECTED,
                provider=self.name,
                error="Unexpected response from OpenRouter",
            )

        models = [ModelInfo(name=m.get("id", "")) for m in entries]
        return ProviderStatus(status=ConnectionState.CONNECTED, provider=self.name, models=models)


def build_llm_provider(settings: Settings, client: Optional[httpx.AsyncClient] = None) -> LLMProvider:
    """Create the provider selected by ``LLM_PROVIDER``.

    Args:
        settings: Application settings.
        client: Optional preconfigured ``httpx.AsyncClient`` (tests inject a mock transport).
    """
    if settings.llm_provider == "ollama":
        ollama = settings.ollama
        logger.info(f"Using Ollama backend at {ollama.base_url} (model={ollama.model})")
        return OllamaProvider(ollama.base_url, ollama.model, timeout=settings.llm_timeout_seconds, client=client)

    openrouter = settings.openrouter
    logger.info(f"Using OpenRouter backend at {openrouter.base_url} (model={openrouter.model})")
    return OpenRouterProvider(
        openrouter.api_key,
        openrouter.model,
        openrouter.base_url,
        timeout=settings.llm_timeout_seconds,
        client=client,
    )
