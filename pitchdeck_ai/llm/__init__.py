"""LLM integration: backends, prompt templates and response extraction."""

from .errors import (
    LLMConfigurationError,
    LLMError,
    LLMProviderError,
    LLMResponseParseError,
    LLMResponseValidationError,
)
from .extraction import (
    PITCH_DECK_REQUIRED_FIELDS,
    VALIDATION_REQUIRED_FIELDS,
    extract_json_object,
    require_fields,
)
from .providers import LLMProvider, OllamaProvider, OpenRouterProvider, build_llm_provider

__all__ = [
    "LLMConfigurationError",
    "LLMError",
    "LLMProvider",
    "LLMProviderError",
    "LLMResponseParseError",
    "LLMResponseValidationError",
    "OllamaProvider",
    "OpenRouterProvider",
    "PITCH_DECK_REQUIRED_FIELDS",
    "VALIDATION_REQUIRED_FIELDS",
    "build_llm_provider",
    "extract_json_object",
    "require_fields",
]
