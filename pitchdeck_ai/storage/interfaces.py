"""Storage interface contract.

The API and services depend on this Protocol instead of a concrete backend.
Two implementations exist: :class:`~pitchdeck_ai.storage.memory.MemStorage`
(process-local dictionaries) and :class:`~pitchdeck_ai.storage.sql.SqlStorage`
(SQLModel over async SQLAlchemy).

Contract guidelines
-------------------

- All methods are async.
- Records are the SQLModel entities ``User`` and ``PitchDeck``; both backends
  return them with ``id`` and ``created_at`` populated.
- Usernames are unique; creating a duplicate raises ``DuplicateUsernameError``.
- ``list_pitch_decks`` returns newest first.
- Deleting an unknown deck is not an error; it returns ``False``.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Protocol

from pitchdeck_ai.core.database.entities import PitchDeck, User


class UsageAction(str, Enum):
    """Metered operations; each maps to a usage counter on ``User``."""

    VALIDATION = "validation"
    PITCH_DECK = "pitch_deck"

    @property
    def counter_field(self) -> str:
        return "validations_used" if self is UsageAction.VALIDATION else "pitch_decks_used"


class Storage(Protocol):
    """Persist users and pitch decks."""

    async def get_user(self, user_id: int) -> Optional[User]:
        """
        Retrieve a user by id.

        Returns:
            The user, or None if unknown.
        """
        ...

    async def get_user_by_username(self, username: str) -> Optional[User]:
        """
        Retrieve a user by exact username.
        """
        ...

    async def create_user(self, username: str, password_hash: str, tier: str = "free") -> User:
        """
        Create a user with zeroed usage counters.

        Raises:
            DuplicateUsernameError: If the username is taken.
        """
        ...

    async def increment_usage(self, user_id: int, action: UsageAction) -> Optional[User]:
        """
        Add one to the counter for ``action``.

        Returns:
            The updated user, or None if unknown.
        """
        ...

    async def get_pitch_deck(self, deck_id: int) -> Optional[PitchDeck]:
        ...

    async def create_pitch_deck(self, deck: PitchDeck) -> PitchDeck:
        """
        Persist a new deck. ``id`` and ``created_at`` are assigned by the backend.
        """
        ...

    async def list_pitch_decks(self, user_id: Optional[int] = None) -> List[PitchDeck]:
        """
        List decks newest first, optionally only those owned by ``user_id``.
        """
        ...

    async def delete_pitch_deck(self, deck_id: int) -> bool:
        """
        Delete a deck.

        Returns:
            True if a deck was removed.
        """
        ...

    async def close(self) -> None:
        """Release backend resources."""
        ...
