"""Prompt templates for pitch deck generation and business validation.

Each builder returns a list of chat messages (``{"role", "content"}`` dicts)
ready to hand to an :class:`~pitchdeck_ai.llm.providers.LLMProvider`.
"""

from __future__ import annotations

import json
import random
from typing import Any, Dict, List, Mapping

Message = Dict[str, str]

PITCH_DECK_SYSTEM_PROMPT = """You are an expert startup consultant and pitch deck generator. Given a problem or keyword, generate a comprehensive startup pitch deck with the following structure. Return ONLY a valid JSON object with these exact fields:

{
  "startupName": "Creative, memorable startup name",
  "problem": "Clear problem statement (2-3 sentences)",
  "solution": "Compelling solution description (2-3 sentences)",
  "marketSize": {
    "tam": "Total Addressable Market (e.g., $240B)",
    "sam": "Serviceable Addressable Market (e.g., $45B)",
    "som": "Serviceable Obtainable Market (e.g., $2.8B)",
    "description": "Brief market context (1-2 sentences)"
  },
  "businessModel": [
    {
      "name": "Revenue Stream 1",
      "description": "Description of revenue stream",
      "revenue": "Expected revenue range"
    },
    {
      "name": "Revenue Stream 2",
      "description": "Description of revenue stream",
      "revenue": "Expected revenue range"
    }
  ],
  "techStack": [
    {"name": "Technology 1", "category": "Frontend/Backend/Database/AI/etc"},
    {"name": "Technology 2", "category": "Frontend/Backend/Database/AI/etc"}
  ],
  "team": [
    {
      "role": "CEO/CTO/VP Product/etc",
      "description": "Background and expertise",
      "initials": "AA"
    }
  ],
  "summary": "Executive summary (3-4 sentences covering problem, solution, market opportunity, and ask)"
}

Make the startup realistic, innovative, and investible. Base all content on the provided prompt but be creative and specific."""

VALIDATION_PROMPT_TEMPLATE = """You are an expert business analyst and startup consultant. Analyze the following business idea comprehensively and return ONLY a valid JSON object with detailed validation data.

Business Idea: "{idea}"

Return this exact JSON structure:
{{
  "startupName": "Creative, memorable name for this startup",
  "validationScore": 85,
  "confidence": 78,
  "stage": "idea",
  "recommendation": "go",
  "analysis": {{
    "problemSolutionFit": {{
      "score": 82,
      "insights": ["Key insight 1", "Key insight 2", "Key insight 3"],
      "concerns": ["Concern 1", "Concern 2"]
    }},
    "marketSize": {{
      "tam": "$50B",
      "sam": "$8B",
      "som": "$400M",
      "score": 75,
      "description": "Brief market context and growth potential"
    }},
    "targetAudience": {{
      "primary": "Primary customer segment",
      "secondary": "Secondary customer segment",
      "demographics": "Age, income, location details",
      "psychographics": "Behavior, values, pain points",
      "score": 88
    }},
    "competitors": [
      {{
        "name": "Competitor 1",
        "type": "direct",
        "strengths": ["Strength 1", "Strength 2"],
        "weaknesses": ["Weakness 1", "Weakness 2"]
      }},
      {{
        "name": "Competitor 2",
        "type": "indirect",
        "strengths": ["Strength 1"],
        "weaknesses": ["Weakness 1", "Weakness 2"]
      }}
    ],
    "businessModel": {{
      "primaryRevenue": "Main revenue stream description",
      "secondaryRevenue": ["Secondary stream 1", "Secondary stream 2"],
      "scalability": 85,
      "feasibility": 78
    }},
    "techStack": [
      {{"name": "Technology 1", "category": "Frontend", "complexity": "medium", "cost": "low"}},
      {{"name": "Technology 2", "category": "Backend", "complexity": "high", "cost": "medium"}},
      {{"name": "Technology 3", "category": "Database", "complexity": "low", "cost": "low"}}
    ],
    "strengths": ["Major strength 1", "Major strength 2", "Major strength 3"],
    "weaknesses": ["Key weakness 1", "Key weakness 2"],
    "risks": ["Risk 1", "Risk 2", "Risk 3"],
    "opportunities": ["Opportunity 1", "Opportunity 2", "Opportunity 3"]
  }}
}}

Rules:
- validationScore: 0-100 overall business viability
- confidence: 0-100 how confident the analysis is
- stage: "idea", "mvp", or "growth"
- recommendation: "go", "wait", or "pivot"
- All scores should be realistic numbers between 0-100
- Make insights specific and actionable
- Consider real market conditions and competition
- Be honest about weaknesses and risks"""

FOLLOWUP_PITCH_DECK_TEMPLATE = """Based on this validated business idea, create a professional pitch deck. Return ONLY valid JSON:

Business: {startup_name}
Problem/Solution: Based on the analysis provided
Market: {market_description}

{skeleton}"""

SURPRISE_PROMPTS = (
    "AI-powered fitness for busy professionals",
    "Sustainable packaging for e-commerce",
    "Mental health support for remote workers",
    "Food waste reduction in restaurants",
    "Elderly care technology solutions",
    "Carbon footprint tracking for individuals",
    "Micro-learning for skill development",
    "Smart home energy optimization",
    "Local community marketplace",
    "Digital detox and mindfulness tools",
    "Voice-controlled accessibility tools",
    "Blockchain-based supply chain tracking",
    "AR/VR for remote team collaboration",
    "IoT sensors for urban agriculture",
    "Personalized nutrition using AI",
    "Quantum computing for drug discovery",
    "Renewable energy storage solutions",
    "Autonomous drone delivery networks",
    "Virtual reality therapy platforms",
    "Decentralized social media platforms",
)


def build_pitch_deck_messages(prompt: str) -> List[Message]:
    return [
        {"role": "system", "content": PITCH_DECK_SYSTEM_PROMPT},
        {"role": "user", "content": f"Generate a startup pitch deck for: {prompt}"},
    ]


def build_validation_messages(idea: str) -> List[Message]:
    return [{"role": "user", "content": VALIDATION_PROMPT_TEMPLATE.format(idea=idea)}]


def build_followup_pitch_deck_messages(validation: Mapping[str, Any]) -> List[Message]:
    """Seed a pitch deck prompt from a completed validation.

    Args:
        validation: The validation as a camelCase mapping (the model's own JSON,
            or ``ValidationContent.model_dump(by_alias=True)``).
    """
    startup_name = validation.get("startupName", "")
    market = (validation.get("analysis") or {}).get("marketSize") or {}

    skeleton = {
        "startupName": startup_name,
        "problem": "Clear problem statement based on analysis",
        "solution": "Compelling solution description",
        "marketSize": {
            "tam": market.get("tam", ""),
            "sam": market.get("sam", ""),
            "som": market.get("som", ""),
            "description": market.get("description", ""),
        },
        "businessModel": [
            {"name": "Revenue Stream 1", "description": "Description", "revenue": "Amount"},
            {"name": "Revenue Stream 2", "description": "Description", "revenue": "Amount"},
        ],
        "techStack": [
            {"name": "Tech 1", "category": "Category"},
            {"name": "Tech 2", "category": "Category"},
        ],
        "team": [
            {"role": "CEO", "description": "Background needed", "initials": "AA"},
            {"role": "CTO", "description": "Technical background", "initials": "BB"},
        ],
        "summary": "Executive summary covering problem, solution, market, and ask",
    }
    content = FOLLOWUP_PITCH_DECK_TEMPLATE.format(
        startup_name=startup_name,
        market_description=market.get("description", ""),
        skeleton=json.dumps(skeleton, indent=2),
    )
    return [{"role": "user", "content": content}]


def random_prompt(rng: random.Random | None = None) -> str:
    """Pick a "surprise me" idea."""
    return (rng or random).choice(SURPRISE_PROMPTS)
