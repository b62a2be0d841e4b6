"""
Process-local storage backend.

Everything lives in dictionaries keyed by integer ids that start at 1. Data
is lost on restart, which makes this the default for development and tests.
"""

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

from pitchdeck_ai.core.database.base import utc_now
from pitchdeck_ai.core.database.entities import PitchDeck, User
from pitchdeck_ai.core.logging_config import get_logger

from .errors import DuplicateUsernameError
from .interfaces import UsageAction

logger = get_logger(__name__)


class MemStorage:
    """In-memory implementation of :class:`~pitchdeck_ai.storage.interfaces.Storage`."""

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._decks: Dict[int, PitchDeck] = {}
        self._next_user_id = 1
        self._next_deck_id = 1
        self._lock = asyncio.Lock()

    async def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def create_user(self, username: str, password_hash: str, tier: str = "free") -> User:
        async with self._lock:
            if await self.get_user_by_username(username) is not None:
                raise DuplicateUsernameError(username)
            user = User(
                id=self._next_user_id,
                username=username,
                password_hash=password_hash,
                tier=tier,
                validations_used=0,
                pitch_decks_used=0,
                created_at=utc_now(),
            )
            self._users[user.id] = user
            self._next_user_id += 1
        logger.debug(f"Created user {user.id} ({username})")
        return user

    async def increment_usage(self, user_id: int, action: UsageAction) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None
        field = action.counter_field
        setattr(user, field, getattr(user, field) + 1)
        return user

    async def get_pitch_deck(self, deck_id: int) -> Optional[PitchDeck]:
        return self._decks.get(deck_id)

    async def create_pitch_deck(self, deck: PitchDeck) -> PitchDeck:
        async with self._lock:
            deck.id = self._next_deck_id
            deck.created_at = utc_now()
            self._decks[deck.id] = deck
            self._next_deck_id += 1
        return deck

    async def list_pitch_decks(self, user_id: Optional[int] = None) -> List[PitchDeck]:
        decks = [d for d in self._decks.values() if user_id is None or d.user_id == user_id]
        # Ids break ties between decks created within the same clock tick.
        return sorted(decks, key=lambda d: (d.created_at, d.id), reverse=True)

    async def delete_pitch_deck(self, deck_id: int) -> bool:
        return self._decks.pop(deck_id, None) is not None

    async def close(self) -> None:
        self._users.clear()
        self._decks.clear()
