"""
core/plan_pipeline.py
────────────────────────────────────────────────────────────────────────
profile → metrics → request → (await transport) → validate → session

The transport call is the only suspension point. The session is written
only after a plan validated, and then all at once; any failure leaves it
exactly as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.errors import GenerationInProgress, PlanValidationError
from core.models.plan import MealPlan
from core.models.profile import Metrics, Profile
from core.nutrition_calc import compute_metrics
from core.plan_request import build_plan_request
from core.plan_validator import validate
from core.session import NutritionSession
from services.gemini import Transport, TransportError, generate_content

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanOutcome:
    profile: Profile
    metrics: Metrics
    plan: MealPlan | None = None
    anomalies: tuple[str, ...] = ()
    error: TransportError | PlanValidationError | GenerationInProgress | None = None

    @property
    def ok(self) -> bool:
        return self.plan is not None


async def generate_plan(
    session: NutritionSession,
    profile: Profile,
    transport: Transport = generate_content,
) -> PlanOutcome:
    metrics = compute_metrics(profile)

    if session.busy:
        _LOG.warning("plan request refused: another one is in flight")
        return PlanOutcome(
            profile, metrics, error=GenerationInProgress("a plan is already being generated")
        )

    with session.generation():
        payload = build_plan_request(profile, metrics.calories)
        try:
            envelope = await transport(payload)
        except TransportError as exc:
            _LOG.error("Error generating AI plan: %s", exc)
            return PlanOutcome(profile, metrics, error=exc)

        result = validate(envelope)
        if not result.ok:
            _LOG.error("Error generating AI plan: %s (%s)", result.error, type(result.error).__name__)
            return PlanOutcome(profile, metrics, error=result.error)

        session.start_profile(profile)
        session.attach_plan(result.unwrap())

    _LOG.info("plan generated with %d meals", len(result.unwrap().meals))
    return PlanOutcome(profile, metrics, plan=result.plan, anomalies=result.anomalies)
