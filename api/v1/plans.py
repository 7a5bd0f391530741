# api/v1/plans.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from core.errors import USER_FACING_PLAN_ERROR, GenerationInProgress
from core.nutrition_calc import compute_metrics
from core.plan_pipeline import generate_plan
from core.session import NutritionSession
from services.gemini import Transport
from services.state import get_session, get_transport
from api.v1.schemas import MetricsOut, PlanOut, ProfileIn, ProfileOut

_LOG = logging.getLogger(__name__)

router = APIRouter()


# ───────────────────────── metrics only ─────────────────────
@router.post(
    "/metrics",
    response_model=MetricsOut,
    summary="BMI and daily calorie target for a profile",
)
def metrics(body: ProfileIn) -> MetricsOut:
    return MetricsOut.model_validate(compute_metrics(body.to_profile()))


# ───────────────────────── generate ─────────────────────────
@router.post(
    "/plans",
    response_model=PlanOut,
    status_code=status.HTTP_201_CREATED,
    summary="Compute metrics, generate a meal plan and start the session",
)
async def create_plan(
    body: ProfileIn,
    session: NutritionSession = Depends(get_session),
    transport: Transport = Depends(get_transport),
) -> PlanOut:
    outcome = await generate_plan(session, body.to_profile(), transport)

    if isinstance(outcome.error, GenerationInProgress):
        raise HTTPException(status_code=409, detail="A plan is already being generated.")
    if not outcome.ok:
        # raw model output only goes to the log
        _LOG.info("plan generation failed: %s", type(outcome.error).__name__)
        raise HTTPException(status_code=502, detail=USER_FACING_PLAN_ERROR)

    return PlanOut(
        profile=ProfileOut.model_validate(outcome.profile),
        metrics=MetricsOut.model_validate(outcome.metrics),
        plan=outcome.plan,
        anomalies=list(outcome.anomalies),
    )
