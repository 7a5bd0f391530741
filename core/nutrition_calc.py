"""
core/nutrition_calc.py
────────────────────────────────────────────────────────────────────────
Derived health metrics for a `Profile`:

1. BMI  (kg / m², one decimal)
2. BMR  (Mifflin–St Jeor, fixed +5 offset, no sex term)
3. TDEE (activity multiplier, 1.2 when the level is unknown)
4. Daily calories (goal adjustment, rounded once at the end)

Everything here is pure; NaN inputs come out as NaN.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

from core.models.profile import ActivityLevel, HealthGoal, Metrics, Profile

Logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    ActivityLevel.sedentary.value: 1.2,
    ActivityLevel.light.value: 1.375,
    ActivityLevel.moderate.value: 1.55,
    ActivityLevel.active.value: 1.725,
    ActivityLevel.extra_active.value: 1.9,
}
DEFAULT_MULTIPLIER = 1.2

GOAL_ADJUSTMENTS: dict[str, float] = {
    HealthGoal.weight_loss.value: -500,
    HealthGoal.muscle_gain.value: 300,
}


def _round_half_up(value: float, places: int = 0) -> float:
    """Round on the exact binary value, ties away from zero (JS toFixed)."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _js_round(value: float) -> float:
    """Nearest integer, ties toward +∞."""
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class NutritionalCalculator:
    """Source-of-truth for BMI and the daily kcal target."""

    # --------------- BMI --------------------------------------------
    def bmi(self, weight_kg: float, height_cm: float) -> float:
        if height_cm <= 0:
            return 0
        height_m = height_cm / 100
        return _round_half_up(weight_kg / (height_m * height_m), 1)

    # --------------- BMR / TDEE -------------------------------------
    def bmr(self, p: Profile) -> float:
        return 10 * p.weight_kg + 6.25 * p.height_cm - 5 * p.age + 5

    def multiplier(self, activity_level: str | None) -> float:
        return ACTIVITY_MULTIPLIERS.get(activity_level or "", DEFAULT_MULTIPLIER)

    def tdee(self, p: Profile) -> float:
        return self.bmr(p) * self.multiplier(p.activity_level)

    # --------------- Calories ---------------------------------------
    def daily_calories(self, p: Profile) -> int:
        kcal = self.tdee(p) + GOAL_ADJUSTMENTS.get(p.health_goal, 0)
        rounded = _js_round(kcal)
        return int(rounded) if math.isfinite(rounded) else rounded

    # --------------- public entrypoint ------------------------------
    def metrics(self, p: Profile) -> Metrics:
        m = Metrics(
            bmi=self.bmi(p.weight_kg, p.height_cm),
            calories=self.daily_calories(p),
        )
        Logger.debug("metrics for %s: bmi=%s kcal=%s", p.name, m.bmi, m.calories)
        return m


_calc = NutritionalCalculator()


def compute_bmi(weight_kg: float, height_cm: float) -> float:
    return _calc.bmi(weight_kg, height_cm)


def compute_daily_calories(profile: Profile) -> int:
    return _calc.daily_calories(profile)


def compute_metrics(profile: Profile) -> Metrics:
    return _calc.metrics(profile)
