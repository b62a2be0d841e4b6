"""
Usage Quota Endpoint.

Reports how much of the tier quota the caller has consumed. Anonymous
callers get the anonymous tier limits with zero usage, since their
consumption is tracked client-side.
"""

from fastapi import APIRouter

from pitchdeck_ai.core.models.io.auth import UsageStatus
from pitchdeck_ai.server.services.deps import OptionalUserDep
from pitchdeck_ai.server.services.usage import usage_status

router = APIRouter()


@router.get(
    "",
    response_model=UsageStatus,
    summary="Get Usage",
    description="Retrieve tier limits and usage counters for the current user.",
    response_description="Usage counters and limits; -1 means unlimited.",
)
async def get_usage(user: OptionalUserDep) -> UsageStatus:
    """
    Get usage for the caller.

    - **validations** / **pitchDecks**: amounts used so far.
    - **maxValidations** / **maxPitchDecks**: tier limits, ``-1`` for unlimited.
    """
    return usage_status(user)
