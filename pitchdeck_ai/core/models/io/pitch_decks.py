"""
Pitch deck I/O models for API requests and responses.

``PitchDeckContent`` is the shape the LLM is asked to return;
``PitchDeckData`` is what the API hands back once the deck is stored.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from pitchdeck_ai.core.database.entities.pitch_decks import PitchDeck

from .base import CamelModel


class MarketSize(CamelModel):
    """TAM/SAM/SOM figures as free text, e.g. ``$240B``."""

    tam: str = ""
    sam: str = ""
    som: str = ""
    description: str = ""


class RevenueStream(CamelModel):
    name: str
    description: str = ""
    revenue: Optional[str] = None


class TechItem(CamelModel):
    name: str
    category: str = ""


class TeamMember(CamelModel):
    role: str
    description: str = ""
    initials: str = ""


class PitchDeckContent(CamelModel):
    """Structured pitch deck as produced by the model."""

    startup_name: str = Field(description="Creative, memorable startup name")
    problem: str
    solution: str
    market_size: MarketSize
    business_model: List[RevenueStream]
    tech_stack: List[TechItem]
    team: List[TeamMember]
    summary: str


class PitchDeckData(PitchDeckContent):
    """A stored pitch deck as returned to clients."""

    id: str
    original_prompt: str
    generated_at: datetime

    @classmethod
    def from_entity(cls, deck: PitchDeck) -> "PitchDeckData":
        """Build the API shape from a stored ``PitchDeck`` row."""
        return cls(
            id=str(deck.id),
            startup_name=deck.startup_name,
            problem=deck.problem,
            solution=deck.solution,
            market_size=MarketSize.model_validate(deck.market_size or {}),
            business_model=[RevenueStream.model_validate(item) for item in deck.business_model or []],
            tech_stack=[TechItem.model_validate(item) for item in deck.tech_stack or []],
            team=[TeamMember.model_validate(item) for item in deck.team or []],
            summary=deck.summary,
            original_prompt=deck.original_prompt,
            generated_at=deck.created_at,
        )


class GeneratePitchDeckRequest(CamelModel):
    """Body of ``POST /api/generate``."""

    prompt: str = Field(default="", description="Short business idea to expand into a deck")
    model: Optional[str] = Field(default=None, description="Model override; the backend default is used if omitted")


class GeneratePitchDeckResponse(CamelModel):
    success: bool = True
    pitch_deck: PitchDeckData


class SurprisePromptResponse(CamelModel):
    prompt: str
