"""
User entity model.

A user owns a tier and two usage counters. Passwords are only ever stored as
bcrypt hashes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class User(Base, table=True):
    """Entity for an application account.

    Table: users
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=255, unique=True, index=True)
    password_hash: str = Field(max_length=255)

    # 'free', 'pro' or 'enterprise'
    tier: str = Field(default="free", max_length=32)
    validations_used: int = Field(default=0)
    pitch_decks_used: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username}, tier={self.tier})"
