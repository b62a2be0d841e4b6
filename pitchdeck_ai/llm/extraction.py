"""JSON extraction for free-text model replies.

Models frequently wrap the requested JSON in prose or Markdown fences. The
extractor takes the widest ``{...}`` span of the reply (first opening brace to
last closing brace) and parses it; anything else is a parse error.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, Iterable

from pitchdeck_ai.core.logging_config import get_logger

from .errors import LLMResponseParseError, LLMResponseValidationError

logger = get_logger(__name__)

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

PITCH_DECK_REQUIRED_FIELDS = (
    "startupName",
    "problem",
    "solution",
    "marketSize",
    "businessModel",
    "techStack",
    "team",
    "summary",
)

VALIDATION_REQUIRED_FIELDS = (
    "startupName",
    "validationScore",
    "recommendation",
    "analysis",
)


def extract_json_object(text: str) -> Dict[str, Any]:
    """Extract and parse the JSON object embedded in a model reply.

    Args:
        text: Raw model output.

    Returns:
        The parsed object.

    Raises:
        LLMResponseParseError: No span could be parsed, or it was not an object.
    """
    content = (text or "").strip()
    match = _JSON_OBJECT.search(content)
    if match:
        content = match.group(0)

    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        logger.error(f"Failed to parse LLM response: {content[:500]!r}")
        raise LLMResponseParseError(raw=content)

    if not isinstance(data, dict):
        logger.error(f"LLM response is JSON but not an object: {type(data).__name__}")
        raise LLMResponseParseError(raw=content)
    return data


def _is_present(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return True
    return bool(value)


def require_fields(
    data: Dict[str, Any],
    fields: Iterable[str],
    details: str = "Please try regenerating the pitch deck.",
) -> None:
    """Check that every field is present with a truthy value.

    A numeric ``0`` counts as present so that a genuine zero score is not
    rejected.

    Raises:
        LLMResponseValidationError: For the first missing field.
    """
    for field in fields:
        if not _is_present(data.get(field)):
            raise LLMResponseValidationError(f"AI response missing required field: {field}", details=details)
