"""
core/plan_request.py
────────────────────────────────────────────────────────────────────────
Builds the generateContent request for a one-day meal plan.

Macro percentages are *not* computed here: the prompt asks the model for
them (summing to 100) and `core.plan_validator` checks the answer.
"""

from __future__ import annotations

from typing import Any

from core.models.profile import Profile

NONE_SENTINEL = "None"


def _or_none(value: str | None) -> str:
    return value.strip() if value and value.strip() else NONE_SENTINEL


def build_plan_prompt(profile: Profile, calories: int) -> str:
    return f"""
You are an expert nutritionist. Create a personalized one-day meal plan for a user with the goal of consuming approximately {calories} kcal.

User Profile:
- Goal: {profile.health_goal}
- Dietary Preference: {profile.dietary_preference}
- Allergies: {_or_none(profile.allergies)}
- Cultural Preference: {_or_none(profile.cultural_preference)}

Provide a simple, healthy, and balanced meal plan.

Return the response ONLY as a valid JSON object with the following structure:
{{
  "meals": {{
    "Breakfast": "...",
    "Lunch": "...",
    "Dinner": "...",
    "Snack": "..."
  }},
  "macros": {{
    "protein": <percentage>,
    "carbs": <percentage>,
    "fats": <percentage>
  }}
}}
Macro percentages must be integers. The sum of macro percentages must be 100.
JSON only. No markdown. No backticks.
""".strip()


def build_plan_request(profile: Profile, calories: int) -> dict[str, Any]:
    """Request body for the generateContent endpoint."""
    return {"contents": [{"parts": [{"text": build_plan_prompt(profile, calories)}]}]}
