"""
Prompt Suggestion Endpoint.
"""

from fastapi import APIRouter

from pitchdeck_ai.core.models.io.pitch_decks import SurprisePromptResponse
from pitchdeck_ai.llm.prompts import random_prompt

router = APIRouter()


@router.get(
    "/surprise",
    response_model=SurprisePromptResponse,
    summary="Surprise Me",
    description="Return a random startup idea to use as a generation prompt.",
)
async def surprise_prompt() -> SurprisePromptResponse:
    return SurprisePromptResponse(prompt=random_prompt())
