"""
Shared base for API I/O models.

The browser client and the LLM both speak camelCase JSON, while Python code
uses snake_case attributes. Every I/O model accepts either spelling on input
and serializes with camelCase aliases.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases and lenient number-to-string coercion."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        coerce_numbers_to_str=True,
    )


class SuccessResponse(CamelModel):
    """Acknowledgement body for operations without a payload."""

    success: bool = True
