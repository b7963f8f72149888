# tests/test_cors.py
"""Tests for CORS handling - simulating browser requests."""

import pytest


# =============================================================================
# Preflight (OPTIONS)
# =============================================================================


@pytest.mark.asyncio
async def test_preflight_api_path(client):
    """Browser preflight before POST /api/generate-driver."""
    response = await client.options(
        "/api/generate-driver",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 204
    assert response.headers.get("access-control-allow-origin") == "*"
    assert "POST" in response.headers.get("access-control-allow-methods", "")
    assert "content-type" in response.headers.get("access-control-allow-headers", "").lower()


@pytest.mark.asyncio
async def test_preflight_any_path(client):
    """OPTIONS is answered for every path, including unknown ones."""
    for path in ("/", "/api/blueprints", "/api/unknown", "/some/page"):
        response = await client.options(path)

        assert response.status_code == 204, f"Preflight failed for {path}"
        assert response.headers.get("access-control-allow-origin") == "*"
        assert response.content == b""


# =============================================================================
# Simple requests
# =============================================================================


@pytest.mark.asyncio
async def test_simple_get_with_origin(client):
    response = await client.get(
        "/api/blueprints",
        headers={"Origin": "http://localhost:3007"},
    )

    assert response.status_code == 200
    assert response.headers.get("access-control-allow-origin") == "*"


@pytest.mark.asyncio
async def test_simple_get_no_origin(client):
    """Same-origin or curl-like request: no CORS headers needed."""
    response = await client.get("/api/blueprints")

    assert response.status_code == 200
    assert response.headers.get("access-control-allow-origin") is None
