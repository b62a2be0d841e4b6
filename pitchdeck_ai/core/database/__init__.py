"""
Database layer for PitchDeck-AI.

Structure:
- entities/: SQLModel table models (users, pitch_decks)
- repositories/: Data access layer, one repository per table
- session.py: Lazily created global engine and session factory
- utils.py: Engine/session factory helpers and table creation
"""

from .base import Base
from .session import (
    dispose_engine,
    get_engine,
    get_session,
    get_session_maker,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "dispose_engine",
    "get_engine",
    "get_session",
    "get_session_maker",
    "init_db",
]
