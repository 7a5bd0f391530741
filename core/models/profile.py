from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    extra_active = "extra-active"


class HealthGoal(str, Enum):
    weight_loss = "weight-loss"
    muscle_gain = "muscle-gain"
    maintain = "maintain"


@dataclass(frozen=True)
class Profile:
    name: str
    age: int               # years
    height_cm: float
    weight_kg: float
    activity_level: str    # ActivityLevel value; unknown strings fall back to sedentary
    dietary_preference: str
    health_goal: str       # HealthGoal value; unknown strings mean "no adjustment"
    allergies: str | None = None
    cultural_preference: str | None = None


@dataclass(frozen=True)
class Metrics:
    bmi: float      # one decimal
    calories: int   # kcal/day
