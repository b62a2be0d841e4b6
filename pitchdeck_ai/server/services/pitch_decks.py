"""
Pitch Deck Service.

Orchestrates the LLM round trips behind the generation and validation
endpoints: build the prompt, call the configured provider, pull the JSON
object out of the reply, check it and turn it into API models. Generated
pitch decks are persisted; validations are returned as-is.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from pitchdeck_ai.core.database.entities import PitchDeck, User
from pitchdeck_ai.core.logging_config import get_logger
from pitchdeck_ai.core.models.io.pitch_decks import PitchDeckContent, PitchDeckData
from pitchdeck_ai.core.models.io.validation import BusinessValidation, ValidationContent
from pitchdeck_ai.core.monitoring import log_error
from pitchdeck_ai.llm import (
    PITCH_DECK_REQUIRED_FIELDS,
    VALIDATION_REQUIRED_FIELDS,
    LLMError,
    LLMProvider,
    LLMResponseValidationError,
    extract_json_object,
    require_fields,
)
from pitchdeck_ai.llm.prompts import (
    build_followup_pitch_deck_messages,
    build_pitch_deck_messages,
    build_validation_messages,
)
from pitchdeck_ai.storage import Storage, UsageAction

from .usage import ensure_can_perform

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _timestamp_id() -> str:
    return str(int(time.time() * 1000))


def _parse_content(data: Dict[str, Any], model: Type[ModelT], details: str) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(f"LLM response did not match {model.__name__}: {e}")
        raise LLMResponseValidationError("AI response had an unexpected structure", details=details) from e


class PitchDeckService:
    """Turns prompts and ideas into pitch decks and validations."""

    def __init__(self, provider: LLMProvider, storage: Storage) -> None:
        self.provider = provider
        self.storage = storage

    async def _ask(self, messages, model: Optional[str]) -> Dict[str, Any]:
        reply = await self.provider.chat(messages, model=model)
        return extract_json_object(reply)

    async def generate_pitch_deck(self, prompt: str, model: Optional[str] = None, user: Optional[User] = None) -> PitchDeckData:
        """
        Generate and store a pitch deck for ``prompt``.

        Args:
            prompt: Short idea or keyword.
            model: Model override; the provider default is used when None.
            user: Signed-in owner, metered against their tier. None for anonymous use.

        Raises:
            UsageLimitExceeded: The user has no pitch decks left.
            LLMError: The provider failed or its reply was unusable.
        """
        ensure_can_perform(user, UsageAction.PITCH_DECK)
        logger.info(f"Generating pitch deck (model={model or self.provider.model}): {prompt[:80]!r}")

        data = await self._ask(build_pitch_deck_messages(prompt), model)
        require_fields(data, PITCH_DECK_REQUIRED_FIELDS)
        content = _parse_content(data, PitchDeckContent, "Please try regenerating the pitch deck.")

        nested = content.model_dump(mode="json", by_alias=True)
        deck = await self.storage.create_pitch_deck(
            PitchDeck(
                user_id=user.id if user else None,
                startup_name=content.startup_name,
                problem=content.problem,
                solution=content.solution,
                market_size=nested["marketSize"],
                business_model=nested["businessModel"],
                tech_stack=nested["techStack"],
                team=nested["team"],
                summary=content.summary,
                original_prompt=prompt,
            )
        )
        if user is not None:
            await self.storage.increment_usage(user.id, UsageAction.PITCH_DECK)

        logger.info(f"Pitch deck {deck.id} saved: {deck.startup_name}")
        return PitchDeckData.from_entity(deck)

    async def validate_business_idea(
        self,
        idea: str,
        model: Optional[str] = None,
        include_pitch_deck: bool = False,
        user: Optional[User] = None,
    ) -> BusinessValidation:
        """
        Run a business validation of ``idea``.

        With ``include_pitch_deck`` a second round trip drafts a pitch deck
        seeded from the validation. That step is best effort: if it fails the
        validation is still returned, without ``pitch_deck``.

        Raises:
            UsageLimitExceeded: The user has no validations left.
            LLMError: The validation call failed or its reply was unusable.
        """
        ensure_can_perform(user, UsageAction.VALIDATION)
        logger.info(f"Validating business idea (model={model or self.provider.model}): {idea[:80]!r}")

        data = await self._ask(build_validation_messages(idea), model)
        require_fields(data, VALIDATION_REQUIRED_FIELDS, details="Please try validating the idea again.")
        content = _parse_content(data, ValidationContent, "Please try validating the idea again.")

        now = datetime.now(timezone.utc)
        validation = BusinessValidation(
            **content.model_dump(),
            id=_timestamp_id(),
            original_idea=idea,
            created_at=now,
        )

        if include_pitch_deck:
            validation.pitch_deck = await self._followup_pitch_deck(content, idea, model)

        if user is not None:
            await self.storage.increment_usage(user.id, UsageAction.VALIDATION)
        return validation

    async def _followup_pitch_deck(
        self, content: ValidationContent, idea: str, model: Optional[str]
    ) -> Optional[PitchDeckData]:
        messages = build_followup_pitch_deck_messages(content.model_dump(mode="json", by_alias=True))
        try:
            data = await self._ask(messages, model)
            deck = _parse_content(data, PitchDeckContent, "Please try regenerating the pitch deck.")
        except LLMError as e:
            logger.warning(f"Follow-up pitch deck failed, returning validation only: {e.message}")
            log_error("FollowupPitchDeckError", e.message, context={"details": e.details})
            return None

        return PitchDeckData(
            **deck.model_dump(),
            id=_timestamp_id(),
            original_prompt=idea,
            generated_at=datetime.now(timezone.utc),
        )
