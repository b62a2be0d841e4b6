"""Error types raised by the LLM layer.

Every error carries a user-facing ``message`` plus optional ``details`` and the
HTTP ``status_code`` the API should answer with.
"""

from __future__ import annotations

from typing import Optional


class LLMError(Exception):
    """Base error for LLM call and response-handling failures.

    Args:
        message: Human-readable error description shown to the user.
        details: Optional hint on how to recover.
        status_code: HTTP status code to report.
    """

    status_code: int = 500

    def __init__(self, message: str, *, details: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code


class LLMConfigurationError(LLMError):
    """The selected backend is missing required configuration (e.g. an API key)."""


class LLMProviderError(LLMError):
    """The backend could not be reached or answered with an error status."""

    status_code = 502


class LLMResponseParseError(LLMError):
    """The model reply did not contain a parseable JSON object."""

    def __init__(
        self,
        message: str = "Failed to parse AI response. Please try again.",
        *,
        details: Optional[str] = "The AI response was not in the expected format.",
        raw: str = "",
    ) -> None:
        super().__init__(message, details=details)
        self.raw = raw


class LLMResponseValidationError(LLMError):
    """The JSON object was missing required fields or had unusable values."""
