"""
LLM Backend Status Endpoint.

Reports whether the configured LLM backend (Ollama or OpenRouter) is reachable
and which models it offers.
"""

from fastapi import APIRouter

from pitchdeck_ai.core.models.io.llm_status import ProviderStatus
from pitchdeck_ai.server.services.deps import LLMProviderDep

router = APIRouter()


@router.get(
    "/status",
    response_model=ProviderStatus,
    response_model_exclude_none=True,
    summary="LLM Backend Status",
    description="Probe the configured LLM backend and list its models.",
    response_description="Connection state, provider name and either the model list or an error.",
)
async def llm_status(provider: LLMProviderDep) -> ProviderStatus:
    """
    Check the LLM backend.

    Always answers 200; an unreachable backend is reported as
    ``{"status": "disconnected", "error": ...}``.
    """
    return await provider.status()
