"""
core/plan_validator.py
────────────────────────────────────────────────────────────────────────
Turns a raw generateContent envelope into a `MealPlan` – or a typed error.

Steps
-----
1. `extract_candidate_text()` – candidates[0].content.parts[0].text
2. `strip_code_fences()`      – drop markdown wrapping
3. `loads_strict()`           – JSON decode (one retry on the {...} slice)
4. `MealPlan` model           – structural checks
5. advisory checks            – macro sum / range, reported as anomalies

`validate()` never raises for bad input and never touches session state;
the caller decides what to do with the `PlanResult`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from core.errors import EmptyResponse, InvalidShape, MalformedJson, PlanValidationError
from core.json_cleanup import extract_json_object, loads_strict, strip_code_fences
from core.models.plan import MealPlan

_LOG = logging.getLogger(__name__)

MACROS_SUM_NOT_100 = "macros_sum_not_100"
MACRO_OUT_OF_RANGE = "macro_out_of_range"


@dataclass(frozen=True)
class PlanResult:
    plan: MealPlan | None = None
    error: PlanValidationError | None = None
    anomalies: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.plan is not None

    def unwrap(self) -> MealPlan:
        if self.plan is None:
            raise self.error or EmptyResponse("no plan")
        return self.plan


# ───────────────────────── step 1: envelope ─────────────────────────
def _first(seq: Any) -> Any:
    return seq[0] if isinstance(seq, list) and seq else None


def extract_candidate_text(envelope: Any) -> str:
    """Return the first candidate's first text part or raise `EmptyResponse`."""
    if not isinstance(envelope, dict):
        raise EmptyResponse("response envelope is not an object")

    candidate = _first(envelope.get("candidates"))
    content = candidate.get("content") if isinstance(candidate, dict) else None
    part = _first(content.get("parts")) if isinstance(content, dict) else None
    text = part.get("text") if isinstance(part, dict) else None

    if not isinstance(text, str) or not text.strip():
        feedback = envelope.get("promptFeedback")
        reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
        detail = f" (blocked: {reason})" if reason else ""
        raise EmptyResponse(f"no candidate text in response{detail}")
    return text


# ───────────────────────── step 3: decode ───────────────────────────
def _decode(cleaned: str) -> Any:
    try:
        return loads_strict(cleaned)
    except (ValueError, RecursionError):
        sliced = extract_json_object(cleaned)
        if sliced is None or sliced == cleaned:
            raise
        _LOG.debug("retrying JSON decode on embedded object")
        return loads_strict(sliced)


# ───────────────────────── step 5: advisory ─────────────────────────
def _anomalies(plan: MealPlan) -> tuple[str, ...]:
    found: list[str] = []
    if not plan.macros.is_balanced:
        found.append(MACROS_SUM_NOT_100)
    if plan.macros.out_of_range:
        found.append(MACRO_OUT_OF_RANGE)
    return tuple(found)


# ───────────────────────── public entrypoint ────────────────────────
def validate(envelope: Any) -> PlanResult:
    try:
        text = extract_candidate_text(envelope)
    except EmptyResponse as exc:
        _LOG.error("Invalid response structure from API: %s", exc)
        return PlanResult(error=exc)

    cleaned = strip_code_fences(text)

    try:
        data = _decode(cleaned)
    except (ValueError, RecursionError) as exc:
        _LOG.error("Failed to parse JSON from AI response: %r", cleaned)
        return PlanResult(error=MalformedJson(f"response is not valid JSON: {exc}", raw_text=cleaned))

    if not isinstance(data, dict):
        _LOG.error("AI response JSON is a %s, expected an object", type(data).__name__)
        return PlanResult(error=InvalidShape("plan must be a JSON object"))

    try:
        plan = MealPlan.model_validate(data)
    except ValidationError as exc:
        _LOG.error("AI response has the wrong shape: %s", exc)
        return PlanResult(error=InvalidShape(str(exc)))

    anomalies = _anomalies(plan)
    if anomalies:
        _LOG.warning(
            "plan accepted with anomalies %s (macro total %.1f)", anomalies, plan.macros.total
        )
    return PlanResult(plan=plan, anomalies=anomalies)
