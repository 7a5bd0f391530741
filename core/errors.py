"""
core/errors.py
────────────────────────────────────────────────────────────────────────
Typed failures for the profile → plan pipeline.

Validation errors are *returned* inside a `PlanResult`; session errors are
raised by the mutators of `NutritionSession`. Diagnostic detail (raw model
text) stays on the exception for logs and tests and is never shown to users.
"""

from __future__ import annotations

# The one message end users see for any plan-generation failure.
USER_FACING_PLAN_ERROR = (
    "Sorry, we couldn't generate a plan. The AI might be busy. Please try again."
)


# ───────────────────────── plan validation ─────────────────────────
class PlanValidationError(Exception):
    """Base for everything the response validator can report."""

    kind = "plan_validation"


class EmptyResponse(PlanValidationError):
    kind = "empty_response"


class MalformedJson(PlanValidationError):
    kind = "malformed_json"

    def __init__(self, message: str, raw_text: str = "") -> None:
        super().__init__(message)
        self.raw_text = raw_text


class InvalidShape(PlanValidationError):
    kind = "invalid_shape"


# ───────────────────────── session state ───────────────────────────
class SessionError(Exception):
    kind = "session"


class NoActiveProfile(SessionError):
    kind = "no_active_profile"


class EmptyLogRequest(SessionError):
    kind = "empty_log_request"


class InvalidWeight(SessionError):
    kind = "invalid_weight"


class GenerationInProgress(SessionError):
    kind = "generation_in_progress"
