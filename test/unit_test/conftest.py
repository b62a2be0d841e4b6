"""Shared fixtures for unit tests: sample model replies and a scripted LLM provider."""

from __future__ import annotations

import copy
import json
from typing import Any, Dict, List, Optional, Sequence, Union

import pytest
import pytest_asyncio

from pitchdeck_ai.core.models.io.llm_status import ConnectionState, ModelInfo, ProviderStatus
from pitchdeck_ai.llm.providers import LLMProvider

PITCH_DECK_PAYLOAD: Dict[str, Any] = {
    "startupName": "GreenBox",
    "problem": "E-commerce packaging creates millions of tons of waste every year.",
    "solution": "Reusable smart packaging returned through a deposit network.",
    "marketSize": {
        "tam": "$240B",
        "sam": "$45B",
        "som": "$2.8B",
        "description": "Sustainable packaging is growing 7% a year.",
    },
    "businessModel": [
        {"name": "Packaging as a Service", "description": "Per-shipment fee for merchants", "revenue": "$5M ARR"},
        {"name": "Data insights", "description": "Logistics analytics for brands"},
    ],
    "techStack": [
        {"name": "React", "category": "Frontend"},
        {"name": "FastAPI", "category": "Backend"},
        {"name": "PostgreSQL", "category": "Database"},
    ],
    "team": [
        {"role": "CEO", "description": "Ex-logistics operator", "initials": "JD"},
        {"role": "CTO", "description": "IoT engineer", "initials": "AS"},
    ],
    "summary": "GreenBox replaces single-use boxes with a reusable network and is raising a $2M seed.",
}

VALIDATION_PAYLOAD: Dict[str, Any] = {
    "startupName": "GreenBox",
    "validationScore": 82,
    "confidence": 74,
    "stage": "idea",
    "recommendation": "go",
    "analysis": {
        "problemSolutionFit": {
            "score": 80,
            "insights": ["Merchants pay for waste disposal", "Consumers prefer green brands"],
            "concerns": ["Return logistics cost"],
        },
        "marketSize": {"tam": "$50B", "sam": "$8B", "som": "$400M", "score": 75, "description": "Growing fast"},
        "targetAudience": {
            "primary": "Mid-size online retailers",
            "secondary": "Subscription boxes",
            "demographics": "EU and US merchants",
            "psychographics": "Sustainability-driven brands",
            "score": 88,
        },
        "competitors": [
            {"name": "LimeLoop", "type": "direct", "strengths": ["First mover"], "weaknesses": ["Small scale"]},
            {"name": "Cardboard", "type": "Indirect", "strengths": ["Cheap"], "weaknesses": ["Waste"]},
        ],
        "businessModel": {
            "primaryRevenue": "Per-shipment fee",
            "secondaryRevenue": ["Analytics"],
            "scalability": 85,
            "feasibility": 70,
        },
        "techStack": [
            {"name": "React", "category": "Frontend", "complexity": "medium", "cost": "low"},
            {"name": "IoT tags", "category": "Hardware", "complexity": "HIGH", "cost": "medium"},
        ],
        "strengths": ["Recurring revenue"],
        "weaknesses": ["Capital intensive"],
        "risks": ["Loss of packaging"],
        "opportunities": ["EU packaging regulation"],
    },
}


@pytest.fixture
def pitch_deck_payload() -> Dict[str, Any]:
    return copy.deepcopy(PITCH_DECK_PAYLOAD)


@pytest.fixture
def validation_payload() -> Dict[str, Any]:
    return copy.deepcopy(VALIDATION_PAYLOAD)


def wrap_reply(payload: Dict[str, Any]) -> str:
    """Format a payload the way chat models usually answer: prose plus a fenced block."""
    return f"Here is your result:\n```json\n{json.dumps(payload, indent=2)}\n```\nGood luck!"


@pytest.fixture
def reply_for():
    return wrap_reply


class FakeLLMProvider(LLMProvider):
    """Provider that replays scripted replies and records every call."""

    name = "fake"
    display_name = "Fake"

    def __init__(self, replies: Optional[Sequence[Union[str, Exception]]] = None) -> None:
        super().__init__(model="fake-model")
        self.replies: List[Union[str, Exception]] = list(replies or [])
        self.calls: List[Dict[str, Any]] = []

    async def chat(self, messages, model=None) -> str:
        self.calls.append({"messages": list(messages), "model": model})
        if not self.replies:
            raise AssertionError("FakeLLMProvider ran out of scripted replies")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def status(self) -> ProviderStatus:
        return ProviderStatus(
            status=ConnectionState.CONNECTED,
            provider=self.name,
            models=[ModelInfo(name="fake-model", size=1024)],
        )


@pytest_asyncio.fixture
async def fake_provider():
    provider = FakeLLMProvider()
    yield provider
    await provider.aclose()
