"""
generateContent transport against httpx.MockTransport.
"""
from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from config import settings
from services.gemini import TransportError, generate_content

PAYLOAD = {"contents": [{"parts": [{"text": "plan please"}]}]}
ENVELOPE = {"candidates": [{"content": {"parts": [{"text": "{}"}]}}]}


@pytest.fixture(autouse=True)
def _gemini_settings(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    monkeypatch.setattr(settings, "gemini_model", "gemini-test")
    monkeypatch.setattr(settings, "gemini_base_url", "https://gemini.example/v1beta/")


def _call(handler) -> object:
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            return await generate_content(PAYLOAD, http=http)

    return asyncio.run(run())


def test_posts_payload_and_returns_envelope():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=ENVELOPE)

    assert _call(handler) == ENVELOPE

    req = seen[0]
    assert req.method == "POST"
    assert req.url.path == "/v1beta/models/gemini-test:generateContent"
    assert req.url.params["key"] == "test-key"
    assert req.headers["content-type"] == "application/json"
    assert json.loads(req.content) == PAYLOAD


def test_non_2xx_is_transport_error():
    def handler(request):
        return httpx.Response(503, text="overloaded")

    with pytest.raises(TransportError) as info:
        _call(handler)
    assert info.value.status_code == 503
    assert info.value.body == "overloaded"


def test_network_failure_is_transport_error():
    def handler(request):
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(TransportError):
        _call(handler)


def test_non_json_body_is_transport_error():
    def handler(request):
        return httpx.Response(200, text="<html>")

    with pytest.raises(TransportError):
        _call(handler)


def test_missing_key(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", None)
    with pytest.raises(TransportError, match="GEMINI_API_KEY"):
        _call(lambda request: httpx.Response(200, json=ENVELOPE))
