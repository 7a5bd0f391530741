# api/v1/session.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from core.errors import EmptyLogRequest, InvalidWeight
from core.progress import progress_summary
from core.session import NutritionSession
from services.state import get_session
from api.v1.schemas import (
    MealLogEntryOut,
    MealLogIn,
    MetricsOut,
    ProfileOut,
    SessionOut,
    WeightEntryOut,
    WeightIn,
)

router = APIRouter()


# ───────────────────────── helpers ──────────────────────────
def _serialize(s: NutritionSession) -> SessionOut:
    return SessionOut(
        profile=ProfileOut.model_validate(s.profile) if s.profile else None,
        metrics=MetricsOut.model_validate(s.metrics) if s.metrics else None,
        plan=s.plan,
        highlights=s.highlights(),
        is_pro=s.is_pro,
        weights=[WeightEntryOut.model_validate(w) for w in s.weights],
        meal_log=[MealLogEntryOut.model_validate(e) for e in s.meal_log],
    )


# ───────────────────────── read ─────────────────────────────
@router.get("", response_model=SessionOut)
def read_session(session: NutritionSession = Depends(get_session)) -> SessionOut:
    return _serialize(session)


@router.get("/progress", summary="Weight chart, macro split and meal history")
def read_progress(session: NutritionSession = Depends(get_session)) -> dict[str, Any]:
    return progress_summary(session)


# ───────────────────────── tracking ─────────────────────────
@router.post(
    "/meals",
    response_model=MealLogEntryOut,
    status_code=status.HTTP_201_CREATED,
)
def log_meals(
    body: MealLogIn,
    session: NutritionSession = Depends(get_session),
) -> MealLogEntryOut:
    try:
        entry = session.log_meals(body.meals)
    except EmptyLogRequest:
        raise HTTPException(422, "Please check at least one meal to log your day.")
    return MealLogEntryOut.model_validate(entry)


@router.post(
    "/weights",
    response_model=WeightEntryOut,
    status_code=status.HTTP_201_CREATED,
)
def record_weight(
    body: WeightIn,
    session: NutritionSession = Depends(get_session),
) -> WeightEntryOut:
    try:
        entry = session.record_weight(body.weight)
    except InvalidWeight:
        raise HTTPException(422, "Weight must be a positive number.")
    return WeightEntryOut.model_validate(entry)


# ───────────────────────── account ──────────────────────────
@router.post("/pro", summary="Toggle the Pro subscription flag")
def toggle_pro(session: NutritionSession = Depends(get_session)) -> dict[str, bool]:
    return {"is_pro": session.toggle_pro()}


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(session: NutritionSession = Depends(get_session)) -> None:
    session.reset()
