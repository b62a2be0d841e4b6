"""
Generation Endpoints.

This module exposes the two LLM-backed operations of the application:
pitch deck generation from a short prompt, and business idea validation.

Includes:
- ``POST /generate``: generate and save a pitch deck
- ``POST /validate``: analyze an idea, optionally drafting a pitch deck too
- Usage metering for signed-in users
- Monitoring of failures via Logfire
"""

from fastapi import APIRouter, HTTPException, status

from pitchdeck_ai.core.logging_config import get_logger
from pitchdeck_ai.core.models.io.pitch_decks import GeneratePitchDeckRequest, GeneratePitchDeckResponse
from pitchdeck_ai.core.models.io.validation import ValidateBusinessIdeaRequest, ValidateBusinessIdeaResponse
from pitchdeck_ai.core.monitoring import log_error
from pitchdeck_ai.llm import LLMError
from pitchdeck_ai.server.services.deps import OptionalUserDep, PitchDeckServiceDep

logger = get_logger(__name__)
router = APIRouter()

_LLM_ERROR_RESPONSES = {
    500: {"description": "The model reply could not be parsed or was incomplete"},
    502: {"description": "The LLM backend could not be reached"},
}


@router.post(
    "/generate",
    response_model=GeneratePitchDeckResponse,
    response_model_exclude_none=True,
    summary="Generate Pitch Deck",
    description="Generate a structured startup pitch deck from a short prompt and save it.",
    response_description="The saved pitch deck.",
    responses={
        400: {"description": "Empty prompt"},
        403: {"description": "Usage limit reached"},
        **_LLM_ERROR_RESPONSES,
    },
)
async def generate_pitch_deck(
    body: GeneratePitchDeckRequest, service: PitchDeckServiceDep, user: OptionalUserDep
) -> GeneratePitchDeckResponse:
    """
    Generate a pitch deck.

    - **prompt**: The problem, keyword or idea to build the deck around.
    - **model**: Optional model override for the configured backend.

    Signed-in users are charged one pitch deck against their tier.
    """
    prompt = body.prompt.strip()
    if not prompt:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Prompt is required")

    try:
        deck = await service.generate_pitch_deck(prompt, body.model, user)
    except LLMError as e:
        log_error(
            error_type=type(e).__name__,
            error_message=e.message,
            context={"operation": "generate", "model": body.model, "user_id": user.id if user else None},
        )
        raise

    return GeneratePitchDeckResponse(pitch_deck=deck)


@router.post(
    "/validate",
    response_model=ValidateBusinessIdeaResponse,
    response_model_exclude_none=True,
    summary="Validate Business Idea",
    description="Score a business idea and return a SWOT-style analysis with a go/wait/pivot recommendation.",
    response_description="The validation, with a pitch deck when one was requested and could be drafted.",
    responses={
        400: {"description": "Empty idea"},
        403: {"description": "Usage limit reached"},
        **_LLM_ERROR_RESPONSES,
    },
)
async def validate_business_idea(
    body: ValidateBusinessIdeaRequest, service: PitchDeckServiceDep, user: OptionalUserDep
) -> ValidateBusinessIdeaResponse:
    """
    Validate a business idea.

    - **idea**: Description of the business idea.
    - **model**: Optional model override.
    - **includesPitchDeck**: Also draft a pitch deck from the analysis. The
      deck is not saved, and a failure drafting it does not fail the request.
    """
    idea = body.idea.strip()
    if not idea:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Business idea is required")

    try:
        validation = await service.validate_business_idea(idea, body.model, body.includes_pitch_deck, user)
    except LLMError as e:
        log_error(
            error_type=type(e).__name__,
            error_message=e.message,
            context={"operation": "validate", "model": body.model, "user_id": user.id if user else None},
        )
        raise

    return ValidateBusinessIdeaResponse(validation=validation)
