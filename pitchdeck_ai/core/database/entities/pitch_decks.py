"""
Pitch deck entity model.

Stores the structured pitch deck produced by the LLM. Nested sections
(market size, revenue streams, tech stack, team) are kept as JSON blobs.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field

from ..base import Base, utc_now


class PitchDeck(Base, table=True):
    """Entity for a generated pitch deck.

    Table: pitch_decks
    """

    __tablename__ = "pitch_decks"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)

    startup_name: str = Field(max_length=255)
    problem: str = Field(sa_column=Column(Text, nullable=False))
    solution: str = Field(sa_column=Column(Text, nullable=False))

    # {tam, sam, som, description}
    market_size: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    # [{name, description, revenue?}]
    business_model: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    # [{name, category}]
    tech_stack: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    # [{role, description, initials}]
    team: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    summary: str = Field(sa_column=Column(Text, nullable=False))
    original_prompt: str = Field(sa_column=Column(Text, nullable=False))

    created_at: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"PitchDeck(id={self.id}, startup_name={self.startup_name})"
