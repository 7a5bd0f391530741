from __future__ import annotations

from dataclasses import dataclass
from datetime import date


def display_date(d: date) -> str:
    """Short calendar form used in the tracking views, e.g. ``10/17/2026``."""
    return f"{d.month}/{d.day}/{d.year}"


@dataclass(frozen=True)
class WeightEntry:
    date: date
    weight: float

    @property
    def display_date(self) -> str:
        return display_date(self.date)


@dataclass(frozen=True)
class MealLogEntry:
    date: date
    meals: tuple[str, ...]   # meal-slot ids, e.g. ("Breakfast", "Lunch")

    @property
    def display_date(self) -> str:
        return display_date(self.date)

    @property
    def count(self) -> int:
        return len(self.meals)
