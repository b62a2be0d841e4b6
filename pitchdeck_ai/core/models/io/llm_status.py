"""
LLM backend status I/O models.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from .base import CamelModel


class ConnectionState(str, Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class ModelInfo(CamelModel):
    name: str
    size: Optional[int] = None


class ProviderStatus(CamelModel):
    """Reachability of the configured LLM backend."""

    status: ConnectionState
    provider: str
    models: Optional[List[ModelInfo]] = None
    error: Optional[str] = None
