"""
Authentication and account I/O models.
"""

from __future__ import annotations

from pydantic import Field

from .base import CamelModel


class Credentials(CamelModel):
    """Body of the sign-up and sign-in endpoints."""

    username: str = Field(default="", description="Account name")
    password: str = Field(default="", description="Plain-text password, only ever hashed server-side")


class UserRead(CamelModel):
    """Public view of an account; never includes the password hash."""

    id: int
    username: str
    tier: str
    validations_used: int
    pitch_decks_used: int


class AuthResponse(CamelModel):
    user: UserRead
    session_id: str


class UsageStatus(CamelModel):
    """Consumption against the tier limits. ``-1`` means unlimited."""

    authenticated: bool
    tier: str
    validations: int
    pitch_decks: int
    max_validations: int
    max_pitch_decks: int
