from __future__ import annotations

import datetime as dt
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from core.models.plan import MealPlan
from .profile import MetricsOut, ProfileOut


class MealLogIn(BaseModel):
    meals: List[str] = Field(default_factory=list, examples=[["Breakfast", "Lunch"]])


class WeightIn(BaseModel):
    weight: float


class WeightEntryOut(BaseModel):
    date: dt.date
    display_date: str
    weight: float

    model_config = ConfigDict(from_attributes=True)


class MealLogEntryOut(BaseModel):
    date: dt.date
    display_date: str
    meals: List[str]

    model_config = ConfigDict(from_attributes=True)


class SessionOut(BaseModel):
    profile: ProfileOut | None = None
    metrics: MetricsOut | None = None
    plan: MealPlan | None = None
    highlights: Dict[str, float] | None = None
    is_pro: bool = False
    weights: List[WeightEntryOut] = []
    meal_log: List[MealLogEntryOut] = []
