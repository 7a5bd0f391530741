from __future__ import annotations

from typing import List

from pydantic import BaseModel

from core.models.plan import MealPlan
from .profile import MetricsOut, ProfileOut


class PlanOut(BaseModel):
    profile: ProfileOut
    metrics: MetricsOut
    plan: MealPlan
    anomalies: List[str] = []
