"""
core/session.py
────────────────────────────────────────────────────────────────────────
`NutritionSession` – everything one logged-in interaction knows:

  • the active profile with its metrics and latest plan
  • weight history   (seeded from the profile, append-only)
  • meal-log history (one entry per logging action, append-only)
  • the Pro flag and the "plan generation in flight" flag

Nothing is persisted; `reset()` is logout.
"""

from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Iterable, Iterator

from core.errors import EmptyLogRequest, GenerationInProgress, InvalidWeight, NoActiveProfile
from core.models.history import MealLogEntry, WeightEntry
from core.models.plan import MealPlan
from core.models.profile import Metrics, Profile
from core.nutrition_calc import compute_metrics

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActiveProfile:
    profile: Profile
    metrics: Metrics
    plan: MealPlan | None = None


class NutritionSession:
    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today
        self._active: ActiveProfile | None = None
        self._weights: list[WeightEntry] = []
        self._meal_log: list[MealLogEntry] = []
        self._is_pro = False
        self._busy = False

    # ─────────────────────────── mutators ─────────────────────────── #
    def start_profile(self, profile: Profile) -> Metrics:
        """Replace the active profile (dropping its plan) and reseed weights."""
        metrics = compute_metrics(profile)
        self._active = ActiveProfile(profile=profile, metrics=metrics)
        self._weights = [WeightEntry(date=self._today(), weight=profile.weight_kg)]
        _LOG.info("profile started for %s (%s kcal)", profile.name, metrics.calories)
        return metrics

    def attach_plan(self, plan: MealPlan) -> None:
        if self._active is None:
            raise NoActiveProfile("start a profile before attaching a plan")
        self._active = replace(self._active, plan=plan)

    def log_meals(self, slot_ids: Iterable[str]) -> MealLogEntry:
        meals = tuple(dict.fromkeys(s.strip() for s in slot_ids if s and s.strip()))
        if not meals:
            raise EmptyLogRequest("at least one meal must be selected")
        entry = MealLogEntry(date=self._today(), meals=meals)
        self._meal_log.append(entry)
        _LOG.debug("logged %d meals", entry.count)
        return entry

    def record_weight(self, value: float) -> WeightEntry:
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or not math.isfinite(value)
            or value <= 0
        ):
            raise InvalidWeight(f"weight must be a positive number, got {value!r}")
        entry = WeightEntry(date=self._today(), weight=float(value))
        self._weights.append(entry)
        return entry

    def toggle_pro(self) -> bool:
        self._is_pro = not self._is_pro
        return self._is_pro

    def reset(self) -> None:
        self._active = None
        self._weights = []
        self._meal_log = []
        self._is_pro = False

    @contextmanager
    def generation(self) -> Iterator[None]:
        """Held while a plan request is outstanding; refuses re-entry."""
        if self._busy:
            raise GenerationInProgress("a plan is already being generated")
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    # ─────────────────────────── accessors ────────────────────────── #
    @property
    def profile(self) -> Profile | None:
        return self._active.profile if self._active else None

    @property
    def metrics(self) -> Metrics | None:
        return self._active.metrics if self._active else None

    @property
    def plan(self) -> MealPlan | None:
        return self._active.plan if self._active else None

    @property
    def has_plan(self) -> bool:
        return self.plan is not None

    @property
    def weights(self) -> tuple[WeightEntry, ...]:
        return tuple(self._weights)

    @property
    def meal_log(self) -> tuple[MealLogEntry, ...]:
        return tuple(self._meal_log)

    @property
    def is_pro(self) -> bool:
        return self._is_pro

    @property
    def busy(self) -> bool:
        return self._busy

    def highlights(self) -> dict[str, float] | None:
        """Target calories, BMI and (with a plan) protein/carbs percentages."""
        m = self.metrics
        if m is None or not m.calories or not m.bmi:
            return None
        out: dict[str, float] = {"calories": m.calories, "bmi": m.bmi}
        if self.plan is not None:
            out.update(protein=self.plan.macros.protein, carbs=self.plan.macros.carbs)
        return out
