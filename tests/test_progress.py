"""
Progress-dashboard data built from session history (no rendering).
"""
from __future__ import annotations

from datetime import date

from core.models.history import MealLogEntry, WeightEntry
from core.models.plan import MealPlan
from core.models.profile import Profile
from core.progress import meal_log_summary, progress_summary, weight_summary
from core.session import NutritionSession

D1, D2 = date(2026, 10, 16), date(2026, 10, 17)


def test_empty_summaries():
    assert weight_summary([])["series"] == []
    assert weight_summary([])["change"] is None
    assert meal_log_summary([])["total_logs"] == 0


def test_weight_summary():
    out = weight_summary(
        [WeightEntry(D1, 80.0), WeightEntry(D2, 78.5), WeightEntry(D2, 79.0)]
    )
    assert out["start"] == 80.0
    assert out["current"] == 79.0
    assert out["change"] == -1.0
    assert out["lowest"] == 78.5
    assert out["labels"] == ["10/16/2026", "10/17/2026", "10/17/2026"]
    assert out["series"] == [80.0, 78.5, 79.0]


def test_meal_log_summary_groups_by_date_and_slot():
    log = [
        MealLogEntry(D1, ("Breakfast", "Lunch")),
        MealLogEntry(D2, ("Breakfast",)),
        MealLogEntry(D2, ("Dinner", "Snack")),
    ]
    out = meal_log_summary(log)
    assert out["total_logs"] == 3
    assert out["total_meals"] == 5
    assert out["by_date"] == {"10/16/2026": 2, "10/17/2026": 3}
    assert out["by_slot"] == {"Breakfast": 2, "Lunch": 1, "Dinner": 1, "Snack": 1}
    assert out["entries"][2] == {"date": "10/17/2026", "meals": ["Dinner", "Snack"], "count": 2}


def test_progress_summary_includes_plan_macros():
    s = NutritionSession(today=lambda: D2)
    assert progress_summary(s)["macros"] is None

    s.start_profile(
        Profile("Ana", 30, 175, 70, "light", "none", "maintain")
    )
    s.attach_plan(
        MealPlan.model_validate(
            {"meals": {"Lunch": "Soup"}, "macros": {"protein": 25, "carbs": 50, "fats": 25}}
        )
    )
    s.log_meals(["Lunch"])
    out = progress_summary(s)
    assert out["macros"] == {"protein": 25.0, "carbs": 50.0, "fats": 25.0}
    assert out["weights"]["series"] == [70.0]
    assert out["meals"]["by_date"] == {"10/17/2026": 1}
