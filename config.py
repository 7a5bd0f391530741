"""
Centralised settings loader.

Values come from the environment or a local `.env` file.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ────────────────────────────────────────────────────
    env_name: str = Field("local", validation_alias="ENV_NAME")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    # ─── Gemini generateContent endpoint ────────────────────────────
    gemini_api_key: str | None = Field(None, validation_alias="GEMINI_API_KEY")
    gemini_model: str = Field("gemini-2.5-flash", validation_alias="GEMINI_MODEL")
    gemini_base_url: str = Field(
        "https://generativelanguage.googleapis.com/v1beta",
        validation_alias="GEMINI_BASE_URL",
    )
    gemini_timeout_s: float = Field(60.0, validation_alias="GEMINI_TIMEOUT_S")

    # allow other teammates’ env-vars without crashing
    model_config = {"extra": "ignore", "env_file": ".env", "env_file_encoding": "utf-8"}


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
