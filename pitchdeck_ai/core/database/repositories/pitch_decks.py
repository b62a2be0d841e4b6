"""
Pitch deck repository.

Data access for saved pitch decks. Listing is always newest first.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.pitch_decks import PitchDeck
from .base import AsyncBaseRepository, QueryBuilder


class PitchDeckRepository(AsyncBaseRepository[PitchDeck]):
    """Repository for pitch deck data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PitchDeck)

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[PitchDeck]:
        """List pitch decks, newest first.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (e.g. ``user_id``)

        Returns:
            List of PitchDeck instances
        """
        stmt = select(PitchDeck).order_by(PitchDeck.created_at.desc(), PitchDeck.id.desc())  # type: ignore[attr-defined, union-attr]
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, PitchDeck, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
