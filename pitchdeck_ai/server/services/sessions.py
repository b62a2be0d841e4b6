"""
Session Store.

Maps opaque bearer tokens to signed-in users. Sessions live in process
memory only, so a restart signs everyone out.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Dict, Optional

from pitchdeck_ai.core.database.entities import User
from pitchdeck_ai.core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SessionInfo:
    user_id: int
    username: str


class SessionStore:
    """In-memory session registry keyed by URL-safe random tokens."""

    def __init__(self) -> None:
        self._sessions: Dict[str, SessionInfo] = {}

    def create(self, user: User) -> str:
        session_id = secrets.token_urlsafe(32)
        self._sessions[session_id] = SessionInfo(user_id=user.id, username=user.username)
        logger.debug(f"Session created for user {user.id}")
        return session_id

    def get(self, session_id: Optional[str]) -> Optional[SessionInfo]:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    def delete(self, session_id: Optional[str]) -> bool:
        if not session_id:
            return False
        return self._sessions.pop(session_id, None) is not None


_session_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    global _session_store
    if _session_store is None:
        _session_store = SessionStore()
    return _session_store
