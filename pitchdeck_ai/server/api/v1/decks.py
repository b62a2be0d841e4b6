"""
Saved Pitch Deck Endpoints.

List, fetch, export and delete the pitch decks produced by ``POST /generate``.
"""

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from pitchdeck_ai.core.logging_config import get_logger
from pitchdeck_ai.core.models.io.base import SuccessResponse
from pitchdeck_ai.core.models.io.pitch_decks import PitchDeckData
from pitchdeck_ai.report import render_pitch_deck_markdown
from pitchdeck_ai.server.services.deps import OptionalUserDep, StorageDep

logger = get_logger(__name__)
router = APIRouter()


async def _get_deck_or_404(storage, deck_id: int) -> PitchDeckData:
    deck = await storage.get_pitch_deck(deck_id)
    if deck is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pitch deck not found")
    return PitchDeckData.from_entity(deck)


@router.get(
    "",
    response_model=list[PitchDeckData],
    response_model_exclude_none=True,
    summary="List Pitch Decks",
    description="List saved pitch decks, newest first.",
    response_description="List of pitch decks.",
)
async def list_decks(
    storage: StorageDep,
    user: OptionalUserDep,
    mine: bool = Query(False, description="Only decks generated by the signed-in user"),
) -> list[PitchDeckData]:
    """
    List pitch decks.

    With ``mine=true`` and a valid session only the caller's own decks are
    returned; anonymous callers always get every deck.
    """
    user_id = user.id if (mine and user is not None) else None
    decks = await storage.list_pitch_decks(user_id=user_id)
    return [PitchDeckData.from_entity(deck) for deck in decks]


@router.get(
    "/{deck_id}",
    response_model=PitchDeckData,
    response_model_exclude_none=True,
    summary="Get Pitch Deck",
    description="Retrieve one saved pitch deck.",
    responses={404: {"description": "Pitch deck not found"}},
)
async def get_deck(deck_id: int, storage: StorageDep) -> PitchDeckData:
    return await _get_deck_or_404(storage, deck_id)


@router.get(
    "/{deck_id}/report",
    response_class=PlainTextResponse,
    summary="Export Pitch Deck",
    description="Render a saved pitch deck as a Markdown document.",
    responses={
        200: {"content": {"text/markdown": {}}, "description": "Markdown report"},
        404: {"description": "Pitch deck not found"},
    },
)
async def get_deck_report(deck_id: int, storage: StorageDep) -> PlainTextResponse:
    deck = await _get_deck_or_404(storage, deck_id)
    return PlainTextResponse(render_pitch_deck_markdown(deck), media_type="text/markdown; charset=utf-8")


@router.delete(
    "/{deck_id}",
    response_model=SuccessResponse,
    summary="Delete Pitch Deck",
    description="Delete a saved pitch deck.",
    responses={404: {"description": "Pitch deck not found"}},
)
async def delete_deck(deck_id: int, storage: StorageDep) -> SuccessResponse:
    if not await storage.delete_pitch_deck(deck_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pitch deck not found")
    logger.info(f"Pitch deck {deck_id} deleted")
    return SuccessResponse()
