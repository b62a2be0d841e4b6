"""
Storage backends for users and pitch decks.

``STORAGE_BACKEND=memory`` selects :class:`MemStorage`;
``STORAGE_BACKEND=database`` selects :class:`SqlStorage` bound to the global
session factory from :mod:`pitchdeck_ai.core.database.session`.
"""

from __future__ import annotations

from pitchdeck_ai.core.logging_config import get_logger
from pitchdeck_ai.server.core.config import Settings

from .errors import DuplicateUsernameError, StorageError
from .interfaces import Storage, UsageAction
from .memory import MemStorage
from .sql import SqlStorage

logger = get_logger(__name__)


def build_storage(settings: Settings) -> Storage:
    """Create the storage backend selected by ``STORAGE_BACKEND``."""
    if settings.storage_backend == "database":
        from pitchdeck_ai.core.database.session import get_session_maker

        logger.info("Using database storage backend")
        return SqlStorage(get_session_maker())

    logger.info("Using in-memory storage backend")
    return MemStorage()


__all__ = [
    "DuplicateUsernameError",
    "MemStorage",
    "SqlStorage",
    "Storage",
    "StorageError",
    "UsageAction",
    "build_storage",
]
