"""
core/progress.py
────────────────────────────────────────────────────────────────────────
Data behind the progress dashboard: the weight chart, the macro split of
the latest plan, and the meal-log history. No rendering happens here.
"""

from __future__ import annotations

from typing import Any, Dict, Sequence

import pandas as pd

from core.models.history import MealLogEntry, WeightEntry, display_date
from core.session import NutritionSession


def weight_summary(weights: Sequence[WeightEntry]) -> Dict[str, Any]:
    if not weights:
        return {"start": None, "current": None, "change": None, "lowest": None,
                "labels": [], "series": []}

    df = pd.DataFrame(
        [{"date": w.display_date, "weight": w.weight} for w in weights]
    )
    start = float(df["weight"].iloc[0])
    current = float(df["weight"].iloc[-1])
    return {
        "start": start,
        "current": current,
        "change": round(current - start, 1),
        "lowest": float(df["weight"].min()),
        "labels": df["date"].tolist(),
        "series": [float(w) for w in df["weight"]],
    }


def meal_log_summary(log: Sequence[MealLogEntry]) -> Dict[str, Any]:
    if not log:
        return {"entries": [], "total_logs": 0, "total_meals": 0,
                "by_date": {}, "by_slot": {}}

    df = pd.DataFrame(
        [{"date": e.date, "count": e.count, "meals": list(e.meals)} for e in log]
    )
    per_day = df.groupby("date", sort=True)["count"].sum()
    per_slot = df.explode("meals")["meals"].value_counts()

    return {
        "entries": [
            {"date": e.display_date, "meals": list(e.meals), "count": e.count}
            for e in log
        ],
        "total_logs": len(df),
        "total_meals": int(df["count"].sum()),
        "by_date": {display_date(d): int(n) for d, n in per_day.items()},
        "by_slot": {str(slot): int(n) for slot, n in per_slot.items()},
    }


def progress_summary(session: NutritionSession) -> Dict[str, Any]:
    plan = session.plan
    return {
        "weights": weight_summary(session.weights),
        "meals": meal_log_summary(session.meal_log),
        "macros": plan.macros.model_dump() if plan else None,
    }
