"""
services/state.py
────────────────────────────────────────────────────────────────────────
Process-wide session holder + FastAPI dependencies.

There is one session per running app (no multi-user support). Tests swap
either dependency through `app.dependency_overrides`.
"""
from __future__ import annotations

from core.session import NutritionSession
from services.gemini import Transport, generate_content

_SESSION: NutritionSession | None = None


def get_session() -> NutritionSession:
    global _SESSION
    if _SESSION is None:
        _SESSION = NutritionSession()
    return _SESSION


def get_transport() -> Transport:
    return generate_content
