from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, field_validator


def _as_text(value: Any) -> str:
    """Coerce one meal description to display text."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, list) and value and all(
        isinstance(v, (str, int, float)) and not isinstance(v, bool) for v in value
    ):
        return ", ".join(str(v) for v in value)
    raise ValueError(f"meal description is not text: {type(value).__name__}")


class Macros(BaseModel):
    """Macro split in percent. Should sum to 100, which is not enforced here."""

    protein: float
    carbs: float
    fats: float

    @field_validator("protein", "carbs", "fats", mode="before")
    @classmethod
    def _numeric(cls, v: Any) -> Any:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("macro percentages must be numbers")
        return v

    @property
    def total(self) -> float:
        return self.protein + self.carbs + self.fats

    @property
    def is_balanced(self) -> bool:
        return math.isclose(self.total, 100.0, abs_tol=1e-6)

    @property
    def out_of_range(self) -> list[str]:
        return [
            name
            for name, pct in (("protein", self.protein), ("carbs", self.carbs), ("fats", self.fats))
            if not 0 <= pct <= 100
        ]


class MealPlan(BaseModel):
    meals: dict[str, str]      # slot name → description, model order kept
    macros: Macros

    @field_validator("meals", mode="before")
    @classmethod
    def _meal_text(cls, v: Any) -> Any:
        if not isinstance(v, dict) or not v:
            raise ValueError("meals must be a non-empty object")
        return {str(slot): _as_text(desc) for slot, desc in v.items()}

    @property
    def slot_ids(self) -> list[str]:
        return list(self.meals)
