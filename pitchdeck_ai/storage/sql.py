"""
SQL storage backend.

Each call opens a short-lived ``AsyncSession`` from the injected session
factory and delegates to the repositories in
:mod:`pitchdeck_ai.core.database.repositories`.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pitchdeck_ai.core.database.entities import PitchDeck, User
from pitchdeck_ai.core.database.repositories import PitchDeckRepository, UserRepository
from pitchdeck_ai.core.logging_config import get_logger

from .errors import DuplicateUsernameError
from .interfaces import UsageAction

logger = get_logger(__name__)


class SqlStorage:
    """Database implementation of :class:`~pitchdeck_ai.storage.interfaces.Storage`.

    The engine behind ``session_factory`` is owned by the caller;
    :meth:`close` does not dispose it.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_user(self, user_id: int) -> Optional[User]:
        async with self._session_factory() as session:
            return await UserRepository(session).get_by_id(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        async with self._session_factory() as session:
            return await UserRepository(session).get_by_username(username)

    async def create_user(self, username: str, password_hash: str, tier: str = "free") -> User:
        async with self._session_factory() as session:
            repo = UserRepository(session)
            if await repo.get_by_username(username) is not None:
                raise DuplicateUsernameError(username)
            try:
                return await repo.create(User(username=username, password_hash=password_hash, tier=tier))
            except IntegrityError as e:
                # Lost a race against a concurrent signup for the same name.
                await session.rollback()
                logger.warning(f"Integrity error creating user {username}: {e.orig}")
                raise DuplicateUsernameError(username) from e

    async def increment_usage(self, user_id: int, action: UsageAction) -> Optional[User]:
        async with self._session_factory() as session:
            return await UserRepository(session).increment_counter(user_id, action.counter_field)

    async def get_pitch_deck(self, deck_id: int) -> Optional[PitchDeck]:
        async with self._session_factory() as session:
            return await PitchDeckRepository(session).get_by_id(deck_id)

    async def create_pitch_deck(self, deck: PitchDeck) -> PitchDeck:
        async with self._session_factory() as session:
            return await PitchDeckRepository(session).create(deck)

    async def list_pitch_decks(self, user_id: Optional[int] = None) -> List[PitchDeck]:
        async with self._session_factory() as session:
            filters = {"user_id": user_id} if user_id is not None else None
            return await PitchDeckRepository(session).list(filters=filters)

    async def delete_pitch_deck(self, deck_id: int) -> bool:
        async with self._session_factory() as session:
            return await PitchDeckRepository(session).delete(deck_id)

    async def close(self) -> None:
        return None
