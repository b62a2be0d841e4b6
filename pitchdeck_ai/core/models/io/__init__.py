"""
I/O models for API requests and responses.

These Pydantic models define the contract between the API and its clients.
All of them serialize with camelCase keys.
"""

from .auth import AuthResponse, Credentials, UsageStatus, UserRead
from .base import CamelModel, SuccessResponse
from .llm_status import ConnectionState, ModelInfo, ProviderStatus
from .pitch_decks import (
    GeneratePitchDeckRequest,
    GeneratePitchDeckResponse,
    MarketSize,
    PitchDeckContent,
    PitchDeckData,
    RevenueStream,
    SurprisePromptResponse,
    TeamMember,
    TechItem,
)
from .validation import (
    BusinessValidation,
    ValidateBusinessIdeaRequest,
    ValidateBusinessIdeaResponse,
    ValidationContent,
)

__all__ = [
    "AuthResponse",
    "BusinessValidation",
    "CamelModel",
    "ConnectionState",
    "Credentials",
    "GeneratePitchDeckRequest",
    "GeneratePitchDeckResponse",
    "MarketSize",
    "ModelInfo",
    "PitchDeckContent",
    "PitchDeckData",
    "ProviderStatus",
    "RevenueStream",
    "SuccessResponse",
    "SurprisePromptResponse",
    "TeamMember",
    "TechItem",
    "UsageStatus",
    "UserRead",
    "ValidateBusinessIdeaRequest",
    "ValidateBusinessIdeaResponse",
    "ValidationContent",
]
