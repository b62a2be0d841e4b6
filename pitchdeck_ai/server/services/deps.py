"""
API Dependencies.

Process-wide singletons (storage backend, LLM provider, pitch deck service,
session store) and the current-user resolution used by the routers. Tests
replace any of these through ``app.dependency_overrides``.
"""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from pitchdeck_ai.core.database.entities import User
from pitchdeck_ai.llm import LLMProvider, build_llm_provider
from pitchdeck_ai.server.core.config import settings
from pitchdeck_ai.storage import Storage, build_storage

from .pitch_decks import PitchDeckService
from .sessions import SessionInfo, SessionStore, get_session_store

_bearer = HTTPBearer(auto_error=False)

_storage: Optional[Storage] = None
_llm_provider: Optional[LLMProvider] = None


def get_storage() -> Storage:
    global _storage
    if _storage is None:
        _storage = build_storage(settings)
    return _storage


def get_llm_provider() -> LLMProvider:
    global _llm_provider
    if _llm_provider is None:
        _llm_provider = build_llm_provider(settings)
    return _llm_provider


async def close_singletons() -> None:
    """Release the provider's HTTP client and the storage backend."""
    global _storage, _llm_provider
    if _llm_provider is not None:
        await _llm_provider.aclose()
        _llm_provider = None
    if _storage is not None:
        await _storage.close()
        _storage = None


StorageDep = Annotated[Storage, Depends(get_storage)]
LLMProviderDep = Annotated[LLMProvider, Depends(get_llm_provider)]
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]
BearerDep = Annotated[Optional[HTTPAuthorizationCredentials], Depends(_bearer)]


def get_pitch_deck_service(provider: LLMProviderDep, storage: StorageDep) -> PitchDeckService:
    return PitchDeckService(provider, storage)


def get_session_id(credentials: BearerDep) -> Optional[str]:
    return credentials.credentials if credentials else None


SessionIdDep = Annotated[Optional[str], Depends(get_session_id)]


def get_session_info(session_id: SessionIdDep, sessions: SessionStoreDep) -> Optional[SessionInfo]:
    return sessions.get(session_id)


SessionInfoDep = Annotated[Optional[SessionInfo], Depends(get_session_info)]


async def get_optional_user(session: SessionInfoDep, storage: StorageDep) -> Optional[User]:
    """Resolve the signed-in user, or None for anonymous and stale sessions."""
    if session is None:
        return None
    return await storage.get_user(session.user_id)


async def get_current_user(session: SessionInfoDep, storage: StorageDep) -> User:
    """
    Resolve the signed-in user or fail.

    Raises:
        HTTPException: 401 without a valid session, 404 if the account is gone.
    """
    if session is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    user = await storage.get_user(session.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


PitchDeckServiceDep = Annotated[PitchDeckService, Depends(get_pitch_deck_service)]
OptionalUserDep = Annotated[Optional[User], Depends(get_optional_user)]
CurrentUserDep = Annotated[User, Depends(get_current_user)]
