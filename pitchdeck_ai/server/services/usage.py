"""
Usage Quotas.

Each tier allows a fixed number of validations and pitch decks; ``-1`` means
unlimited. Only signed-in users are metered on the server. Anonymous quotas
are tracked by the browser client and reported here for completeness.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from pitchdeck_ai.core.database.entities import User
from pitchdeck_ai.core.models.io.auth import UsageStatus
from pitchdeck_ai.storage.interfaces import UsageAction

UNLIMITED = -1
ANONYMOUS_TIER = "anonymous"


@dataclass(frozen=True)
class TierLimits:
    validations: int
    pitch_decks: int

    def for_action(self, action: UsageAction) -> int:
        return self.validations if action is UsageAction.VALIDATION else self.pitch_decks


TIER_LIMITS: Dict[str, TierLimits] = {
    ANONYMOUS_TIER: TierLimits(validations=1, pitch_decks=1),
    "free": TierLimits(validations=5, pitch_decks=3),
    "pro": TierLimits(validations=50, pitch_decks=25),
    "enterprise": TierLimits(validations=UNLIMITED, pitch_decks=UNLIMITED),
}


class UsageLimitExceeded(Exception):
    """Raised when a user has used up the quota of their tier."""

    status_code = 403

    def __init__(self, tier: str, action: UsageAction) -> None:
        super().__init__(f"Usage limit reached for the {tier} tier")
        self.tier = tier
        self.action = action


def limits_for(tier: str) -> TierLimits:
    # Unknown tiers fall back to free.
    return TIER_LIMITS.get(tier, TIER_LIMITS["free"])


def used(user: User, action: UsageAction) -> int:
    return getattr(user, action.counter_field)


def can_perform(user: Optional[User], action: UsageAction) -> bool:
    if user is None:
        return True
    limit = limits_for(user.tier).for_action(action)
    return limit == UNLIMITED or used(user, action) < limit


def ensure_can_perform(user: Optional[User], action: UsageAction) -> None:
    if not can_perform(user, action):
        raise UsageLimitExceeded(user.tier, action)


def usage_status(user: Optional[User]) -> UsageStatus:
    """Summarize consumption against the tier limits of ``user`` (or the anonymous tier)."""
    if user is None:
        limits = TIER_LIMITS[ANONYMOUS_TIER]
        return UsageStatus(
            authenticated=False,
            tier=ANONYMOUS_TIER,
            validations=0,
            pitch_decks=0,
            max_validations=limits.validations,
            max_pitch_decks=limits.pitch_decks,
        )

    limits = limits_for(user.tier)
    return UsageStatus(
        authenticated=True,
        tier=user.tier,
        validations=user.validations_used,
        pitch_decks=user.pitch_decks_used,
        max_validations=limits.validations,
        max_pitch_decks=limits.pitch_decks,
    )
