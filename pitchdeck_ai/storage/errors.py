"""Error types raised by storage backends."""

from __future__ import annotations


class StorageError(Exception):
    """Base error for persistence failures."""


class DuplicateUsernameError(StorageError):
    """A user with the requested username already exists."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username already exists: {username}")
        self.username = username
