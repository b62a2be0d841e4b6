"""
Database entity models.

Modules:
- users: Accounts with tier and usage counters
- pitch_decks: Generated pitch decks
"""

from .pitch_decks import PitchDeck
from .users import User

__all__ = [
    "PitchDeck",
    "User",
]
