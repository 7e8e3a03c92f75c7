from __future__ import annotations

import os

import httpx
import pytest

os.environ["HL_METRICS_ENABLED"] = "true"
os.environ["HL_MAX_TEXT_CHARS"] = "100000"
os.environ["HL_MAX_RANGES"] = "1000"

from highlighter.app.main import app

pytestmark = pytest.mark.anyio


def get_client() -> httpx.AsyncClient:
    transport = httpx.ASGITransport(app=app)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


async def test_health_endpoint() -> None:
    async with get_client() as client:
        response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_highlight_full_text() -> None:
    async with get_client() as client:
        response = await client.post(
            "/highlight",
            json={"text": "abcdefghij", "ranges": [[1, 4], [3, 6]]},
        )
    assert response.status_code == 200
    payload = response.json()
    assert payload["html"] == "a<em>bcdef</em>ghij"
    assert payload["excerpt"] is False
    assert payload["range_count"] == 1
    assert response.headers["X-Request-ID"]


async def test_highlight_excerpt() -> None:
    async with get_client() as client:
        response = await client.post(
            "/highlight",
            json={
                "text": "Hello world! This is a sample text for testing purposes.",
                "ranges": [[6, 11], [35, 38]],
                "excerpt": True,
            },
            headers={"X-Request-ID": "req-1"},
        )
    assert response.status_code == 200
    assert response.json()["html"] == "Hello <em>world</em>! [...] text <em>for</em> testing [...]"
    assert response.headers["X-Request-ID"] == "req-1"


async def test_highlight_rejects_empty_input() -> None:
    async with get_client() as client:
        empty_text = await client.post("/highlight", json={"text": "", "ranges": [[0, 4]]})
        empty_ranges = await client.post("/highlight", json={"text": "Text", "ranges": []})
    assert empty_text.status_code == 400
    assert empty_text.json()["detail"] == "No text provided to highlight"
    assert empty_ranges.status_code == 400
    assert empty_ranges.json()["detail"] == "No ranges provided for highlighting"


async def test_highlight_rejects_malformed_range() -> None:
    async with get_client() as client:
        response = await client.post("/highlight", json={"text": "Text", "ranges": [[0, 1, 2]]})
    assert response.status_code == 422


async def test_highlight_enforces_size_limits() -> None:
    original = os.environ.get("HL_MAX_TEXT_CHARS")
    os.environ["HL_MAX_TEXT_CHARS"] = "5"
    try:
        async with get_client() as client:
            response = await client.post(
                "/highlight", json={"text": "too long", "ranges": [[0, 3]]}
            )
        assert response.status_code == 413
    finally:
        if original is None:
            os.environ.pop("HL_MAX_TEXT_CHARS", None)
        else:
            os.environ["HL_MAX_TEXT_CHARS"] = original


async def test_api_key_required_when_configured() -> None:
    original = os.environ.get("HL_API_KEYS")
    os.environ["HL_API_KEYS"] = "secret"
    try:
        async with get_client() as client:
            response = await client.post("/highlight", json={"text": "Text", "ranges": [[0, 2]]})
            assert response.status_code == 401

            ok_response = await client.post(
                "/highlight",
                json={"text": "Text", "ranges": [[0, 2]]},
                headers={"Authorization": "Bearer secret"},
            )
            assert ok_response.status_code == 200
            assert ok_response.json()["html"] == "<em>Te</em>xt"
    finally:
        if original is None:
            os.environ.pop("HL_API_KEYS", None)
        else:
            os.environ["HL_API_KEYS"] = original


async def test_metrics_endpoint_reports_highlights() -> None:
    async with get_client() as client:
        await client.post("/highlight", json={"text": "Text", "ranges": [[0, 2]]})
        response = await client.get("/metrics")
    assert response.status_code == 200
    assert "highlight_requests_total" in response.text
