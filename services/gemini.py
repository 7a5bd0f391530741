# services/gemini.py
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

import httpx

from config import settings

_LOG = logging.getLogger(__name__)

# A transport takes the request body and returns the decoded JSON envelope.
Transport = Callable[[dict[str, Any]], Awaitable[Any]]


class TransportError(Exception):
    """Non-2xx status or network failure talking to the generation service."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


# ───────────── Endpoint ─────────────
def _endpoint() -> str:
    base = settings.gemini_base_url.rstrip("/")
    return f"{base}/models/{settings.gemini_model}:generateContent"


# ───────────── Generation (async) ─────────────
async def generate_content(
    payload: dict[str, Any],
    http: httpx.AsyncClient | None = None,
) -> Any:
    """POST `payload` to generateContent and return the raw JSON envelope."""
    api_key = settings.gemini_api_key
    if not api_key:
        _LOG.error("GEMINI_API_KEY not set in environment")
        raise TransportError("GEMINI_API_KEY not set in environment")

    own_client = http is None
    client = http or httpx.AsyncClient(timeout=settings.gemini_timeout_s)
    try:
        resp = await client.post(
            _endpoint(),
            params={"key": api_key},
            json=payload,
            headers={"Content-Type": "application/json"},
        )
    except httpx.HTTPError as exc:
        _LOG.error("Gemini request failed: %s", exc)
        raise TransportError(f"request failed: {exc}") from exc
    finally:
        if own_client:
            await client.aclose()

    if resp.is_error:
        _LOG.error("API Error Response (%s): %s", resp.status_code, resp.text)
        raise TransportError(
            f"API call failed with status: {resp.status_code}",
            status_code=resp.status_code,
            body=resp.text,
        )

    try:
        return resp.json()
    except ValueError as exc:
        _LOG.error("Gemini returned a non-JSON body: %r", resp.text)
        raise TransportError("response body is not JSON", resp.status_code, resp.text) from exc
