"""
Authentication Endpoints.

Username/password accounts with opaque bearer session tokens. Clients send
the ``sessionId`` returned by sign-up or sign-in as
``Authorization: Bearer <sessionId>``.

Includes:
- Sign-up, sign-in and sign-out
- Current-user lookup
- OAuth placeholders (Google, GitHub, Twitter) that answer 501
"""

from fastapi import APIRouter, HTTPException, status

from pitchdeck_ai.core.logging_config import get_logger
from pitchdeck_ai.core.models.io.auth import AuthResponse, Credentials, UserRead
from pitchdeck_ai.core.models.io.base import SuccessResponse
from pitchdeck_ai.server.services.deps import (
    CurrentUserDep,
    SessionIdDep,
    SessionStoreDep,
    StorageDep,
)
from pitchdeck_ai.server.services.passwords import hash_password, verify_password
from pitchdeck_ai.storage import DuplicateUsernameError

logger = get_logger(__name__)
router = APIRouter()

OAUTH_PROVIDERS = ("google", "github", "twitter")


def _require_credentials(credentials: Credentials) -> None:
    if not credentials.username or not credentials.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username and password are required")


@router.post(
    "/signup",
    response_model=AuthResponse,
    summary="Sign Up",
    description="Create an account on the free tier and open a session for it.",
    response_description="The new user and a session id.",
    responses={400: {"description": "Missing credentials or username already taken"}},
)
async def signup(credentials: Credentials, storage: StorageDep, sessions: SessionStoreDep) -> AuthResponse:
    """
    Create a new account.

    - **username**: Unique account name.
    - **password**: Stored only as a bcrypt hash.
    """
    _require_credentials(credentials)
    try:
        user = await storage.create_user(credentials.username, hash_password(credentials.password))
    except DuplicateUsernameError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already exists")

    logger.info(f"New account created: {user.username} (id={user.id})")
    return AuthResponse(user=UserRead.model_validate(user), session_id=sessions.create(user))


@router.post(
    "/signin",
    response_model=AuthResponse,
    summary="Sign In",
    description="Check a username and password and open a session.",
    response_description="The user and a session id.",
    responses={400: {"description": "Missing or invalid credentials"}},
)
async def signin(credentials: Credentials, storage: StorageDep, sessions: SessionStoreDep) -> AuthResponse:
    """
    Sign in with username and password.

    Unknown usernames and wrong passwords are reported identically.
    """
    _require_credentials(credentials)
    user = await storage.get_user_by_username(credentials.username)
    if user is None or not verify_password(credentials.password, user.password_hash):
        logger.info(f"Failed sign-in attempt for {credentials.username!r}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")

    return AuthResponse(user=UserRead.model_validate(user), session_id=sessions.create(user))


@router.post(
    "/signout",
    response_model=SuccessResponse,
    summary="Sign Out",
    description="Drop the caller's session if there is one.",
)
async def signout(session_id: SessionIdDep, sessions: SessionStoreDep) -> SuccessResponse:
    sessions.delete(session_id)
    return SuccessResponse()


@router.get(
    "/me",
    response_model=UserRead,
    summary="Current User",
    description="Return the account behind the bearer session.",
    responses={401: {"description": "No valid session"}, 404: {"description": "Account no longer exists"}},
)
async def me(user: CurrentUserDep) -> UserRead:
    return UserRead.model_validate(user)


@router.get(
    "/{provider}",
    summary="OAuth Sign In",
    description="OAuth sign-in with Google, GitHub or Twitter. Not available yet.",
    status_code=status.HTTP_501_NOT_IMPLEMENTED,
    responses={404: {"description": "Unknown provider"}, 501: {"description": "OAuth is not implemented"}},
)
async def oauth_signin(provider: str):
    """
    OAuth placeholder.

    Known providers always answer 501 so the client can show a
    "coming soon" notice.
    """
    if provider not in OAUTH_PROVIDERS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail="OAuth integration coming soon")
