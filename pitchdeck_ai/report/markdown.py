"""Markdown rendering of pitch decks and business validations."""

from __future__ import annotations

from jinja2 import Environment

from pitchdeck_ai.core.logging_config import get_logger
from pitchdeck_ai.core.models.io.pitch_decks import PitchDeckData
from pitchdeck_ai.core.models.io.validation import BusinessValidation

logger = get_logger(__name__)

PITCH_DECK_TEMPLATE = """# {{ deck.startup_name }}

*Generated {{ deck.generated_at.strftime('%Y-%m-%d %H:%M') }} from: "{{ deck.original_prompt }}"*

---

## Problem

{{ deck.problem }}

## Solution

{{ deck.solution }}

## Market Opportunity

| TAM | SAM | SOM |
|-----|-----|-----|
| {{ deck.market_size.tam or '-' }} | {{ deck.market_size.sam or '-' }} | {{ deck.market_size.som or '-' }} |

{% if deck.market_size.description %}
{{ deck.market_size.description }}

{% endif %}
## Business Model

{% for stream in deck.business_model %}
- **{{ stream.name }}**{% if stream.revenue %} ({{ stream.revenue }}){% endif %}: {{ stream.description }}
{% endfor %}

## Tech Stack

{% for category, items in deck.tech_stack | groupby('category') %}
- **{{ category or 'Other' }}**: {{ items | map(attribute='name') | join(', ') }}
{% endfor %}

## Team

{% for member in deck.team %}
- **{{ member.role }}**{% if member.initials %} [{{ member.initials }}]{% endif %}: {{ member.description }}
{% endfor %}

## Executive Summary

{{ deck.summary }}
"""

VALIDATION_TEMPLATE = """# {{ v.startup_name }}: Business Validation

*Idea: "{{ v.original_idea }}"*

| Score | Confidence | Stage | Recommendation |
|-------|------------|-------|----------------|
| {{ v.validation_score }}/100 | {{ v.confidence }}% | {{ v.stage.value | title }} | **{{ v.recommendation.value | upper }}** |

---

## Problem / Solution Fit ({{ a.problem_solution_fit.score }}/100)

{{ bullets(a.problem_solution_fit.insights) }}
{% if a.problem_solution_fit.concerns %}
**Concerns**

{{ bullets(a.problem_solution_fit.concerns) }}
{% endif %}

## Market Size ({{ a.market_size.score }}/100)

- TAM: {{ a.market_size.tam or '-' }}
- SAM: {{ a.market_size.sam or '-' }}
- SOM: {{ a.market_size.som or '-' }}
{% if a.market_size.description %}

{{ a.market_size.description }}
{% endif %}

## Target Audience ({{ a.target_audience.score }}/100)

- Primary: {{ a.target_audience.primary or '-' }}
- Secondary: {{ a.target_audience.secondary or '-' }}
- Demographics: {{ a.target_audience.demographics or '-' }}
- Psychographics: {{ a.target_audience.psychographics or '-' }}

## Competitors

{% for c in a.competitors %}
### {{ c.name }} ({{ c.type.value }})

- Strengths: {{ c.strengths | join('; ') or '-' }}
- Weaknesses: {{ c.weaknesses | join('; ') or '-' }}

{% else %}
No competitors identified.

{% endfor %}
## Business Model

- Primary revenue: {{ a.business_model.primary_revenue or '-' }}
- Secondary revenue: {{ a.business_model.secondary_revenue | join(', ') or '-' }}
- Scalability: {{ a.business_model.scalability }}/100
- Feasibility: {{ a.business_model.feasibility }}/100

## Tech Stack

| Technology | Category | Complexity | Cost |
|------------|----------|------------|------|
{% for t in a.tech_stack %}
| {{ t.name }} | {{ t.category or '-' }} | {{ t.complexity.value }} | {{ t.cost.value }} |
{% endfor %}

## SWOT

**Strengths**

{{ bullets(a.strengths) }}

**Weaknesses**

{{ bullets(a.weaknesses) }}

**Opportunities**

{{ bullets(a.opportunities) }}

**Risks**

{{ bullets(a.risks) }}
{% if v.pitch_deck %}

---

{{ pitch_deck_markdown }}
{% endif %}
"""


def _bullets(items) -> str:
    if not items:
        return "- None"
    return "\n".join(f"- {item}" for item in items)


_env = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True)
_env.globals["bullets"] = _bullets


def render_pitch_deck_markdown(deck: PitchDeckData) -> str:
    """Render a stored pitch deck as a Markdown document."""
    logger.debug(f"Rendering pitch deck {deck.id} as markdown")
    return _env.from_string(PITCH_DECK_TEMPLATE).render(deck=deck)


def render_validation_markdown(validation: BusinessValidation) -> str:
    """Render a business validation, and its pitch deck if present, as Markdown."""
    pitch_deck_markdown = render_pitch_deck_markdown(validation.pitch_deck) if validation.pitch_deck else ""
    return _env.from_string(VALIDATION_TEMPLATE).render(
        v=validation,
        a=validation.analysis,
        pitch_deck_markdown=pitch_deck_markdown,
    )
