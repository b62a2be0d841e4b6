"""
User repository.

Data access for accounts: lookups by id and username, and usage counters.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.users import User
from .base import AsyncBaseRepository, QueryBuilder


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get a user by its unique username.

        Args:
            username: Exact username to look up

        Returns:
            User instance or None
        """
        stmt = select(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def increment_counter(self, user_id: int, field: str) -> Optional[User]:
        """Add one to a usage counter column.

        Args:
            user_id: Owner of the counter
            field: ``validations_used`` or ``pitch_decks_used``

        Returns:
            The updated user, or None if the user does not exist
        """
        user = await self.get_by_id(user_id)
        if user is None:
            return None
        setattr(user, field, getattr(user, field) + 1)
        return await self.update(user)

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[User]:
        stmt = select(User).order_by(User.id.asc())  # type: ignore[union-attr]
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, User, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
