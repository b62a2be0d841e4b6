"""
Database repository layer using SQLModel.

Modules:
- base: AsyncBaseRepository interface and QueryBuilder utilities
- users: User repository operations
- pitch_decks: Pitch deck repository operations
"""

from .base import AsyncBaseRepository, QueryBuilder
from .pitch_decks import PitchDeckRepository
from .users import UserRepository

__all__ = [
    "AsyncBaseRepository",
    "PitchDeckRepository",
    "QueryBuilder",
    "UserRepository",
]
