"""
Business validation I/O models.

A business validation is an extended LLM analysis of an idea: an overall
score, a go/wait/pivot recommendation and a SWOT-style breakdown. Model output
is loose, so scores are coerced into 0-100 integers and enum-like strings are
matched case-insensitively.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, List, Optional

from pydantic import BeforeValidator, Field, field_validator

from .base import CamelModel
from .pitch_decks import PitchDeckData


def clamp_score(value: Any) -> int:
    """Coerce a model-provided score into an integer between 0 and 100."""
    if isinstance(value, bool):
        raise ValueError("score must be a number")
    if isinstance(value, str):
        value = value.strip().rstrip("%")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"score must be a number, got {value!r}")
    return max(0, min(100, int(round(number))))


Score = Annotated[int, BeforeValidator(clamp_score)]


class Stage(str, Enum):
    IDEA = "idea"
    MVP = "mvp"
    GROWTH = "growth"


class Recommendation(str, Enum):
    GO = "go"
    WAIT = "wait"
    PIVOT = "pivot"


class CompetitorType(str, Enum):
    DIRECT = "direct"
    INDIRECT = "indirect"


class Level(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _lower(value: Any) -> Any:
    return value.strip().lower() if isinstance(value, str) else value


class ProblemSolutionFit(CamelModel):
    score: Score = 0
    insights: List[str] = Field(default_factory=list)
    concerns: List[str] = Field(default_factory=list)


class ValidationMarketSize(CamelModel):
    tam: str = ""
    sam: str = ""
    som: str = ""
    score: Score = 0
    description: str = ""


class TargetAudience(CamelModel):
    primary: str = ""
    secondary: str = ""
    demographics: str = ""
    psychographics: str = ""
    score: Score = 0


class Competitor(CamelModel):
    name: str
    type: CompetitorType = CompetitorType.DIRECT
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value: Any) -> Any:
        return _lower(value)


class ValidationBusinessModel(CamelModel):
    primary_revenue: str = ""
    secondary_revenue: List[str] = Field(default_factory=list)
    scalability: Score = 0
    feasibility: Score = 0


class ValidationTechItem(CamelModel):
    name: str
    category: str = ""
    complexity: Level = Level.MEDIUM
    cost: Level = Level.MEDIUM

    @field_validator("complexity", "cost", mode="before")
    @classmethod
    def normalize_levels(cls, value: Any) -> Any:
        return _lower(value)


class ValidationAnalysis(CamelModel):
    problem_solution_fit: ProblemSolutionFit = Field(default_factory=ProblemSolutionFit)
    market_size: ValidationMarketSize = Field(default_factory=ValidationMarketSize)
    target_audience: TargetAudience = Field(default_factory=TargetAudience)
    competitors: List[Competitor] = Field(default_factory=list)
    business_model: ValidationBusinessModel = Field(default_factory=ValidationBusinessModel)
    tech_stack: List[ValidationTechItem] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    risks: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)


class ValidationContent(CamelModel):
    """Validation analysis as produced by the model."""

    startup_name: str
    validation_score: Score
    confidence: Score = 0
    stage: Stage = Stage.IDEA
    recommendation: Recommendation
    analysis: ValidationAnalysis

    @field_validator("stage", "recommendation", mode="before")
    @classmethod
    def normalize_choices(cls, value: Any) -> Any:
        return _lower(value)


class BusinessValidation(ValidationContent):
    """A completed validation as returned to clients."""

    id: str
    original_idea: str
    pitch_deck: Optional[PitchDeckData] = None
    created_at: datetime


class ValidateBusinessIdeaRequest(CamelModel):
    """Body of ``POST /api/validate``."""

    idea: str = Field(default="", description="Business idea to analyze")
    model: Optional[str] = Field(default=None, description="Model override; the backend default is used if omitted")
    includes_pitch_deck: bool = Field(default=False, description="Also generate a pitch deck from the validation")


class ValidateBusinessIdeaResponse(CamelModel):
    success: bool = True
    validation: BusinessValidation
