"""Security hardening tests: response headers, request IDs, 500 without traceback, CORS."""

import json
import os
from unittest.mock import patch

import pytest
from httpx import AsyncClient
from starlette.requests import Request

from app.core.config import get_settings
from app.domain.exceptions import StoreUnavailableException


async def test_api_responses_are_not_cached(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.headers["cache-control"] == "no-store"
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"
    assert "default-src 'none'" in response.headers["content-security-policy"]


async def test_root_page_allows_inline_styles(client: AsyncClient) -> None:
    response = await client.get("/")
    assert "'unsafe-inline'" in response.headers["content-security-policy"]
    assert "cache-control" not in response.headers


async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert len(response.headers["x-request-id"]) == 36


async def test_valid_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123_x"})
    assert response.headers["x-request-id"] == "abc-123_x"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "bad id;injected"}
    )
    assert response.headers["x-request-id"] != "bad id;injected"
    assert len(response.headers["x-request-id"]) == 36


async def test_500_response_does_not_include_detail_when_debug_false() -> None:
    """With debug=False, generic exception handler returns a safe message (no detail)."""
    from app.core.exception_handlers import _generic_exception_handler

    class FakeRequest:
        pass

    with patch("app.core.exception_handlers.get_settings") as m_get_settings:
        m_get_settings.return_value.debug = False
        response = _generic_exception_handler(FakeRequest(), ValueError("sensitive"))
    body = json.loads(response.body.decode())
    assert response.status_code == 500
    assert body == {"error": "INTERNAL_ERROR", "message": "Internal server error"}


async def test_store_unavailable_handler_hides_details() -> None:
    from app.core.exception_handlers import _record_search_exception_handler

    request = Request({"type": "http", "method": "GET", "path": "/api/v1/search", "headers": []})
    response = _record_search_exception_handler(
        request, StoreUnavailableException("connection refused to 10.0.0.5", "deceased")
    )
    assert response.status_code == 503
    assert b"10.0.0.5" not in response.body


async def test_settings_reject_allowed_origins_wildcard() -> None:
    """Settings validation rejects ALLOWED_ORIGINS=* (insecure with credentials)."""
    with patch.dict(os.environ, {"ALLOWED_ORIGINS": "*"}, clear=False):
        get_settings.cache_clear()
        try:
            with pytest.raises(ValueError, match="allowed_origins"):
                get_settings()
        finally:
            get_settings.cache_clear()


async def test_settings_reject_debug_true_in_production() -> None:
    """Settings validation rejects debug=True when telemetry_environment is production."""
    with patch.dict(
        os.environ,
        {"TELEMETRY_ENVIRONMENT": "production", "DEBUG": "true"},
        clear=False,
    ):
        get_settings.cache_clear()
        try:
            with pytest.raises(ValueError, match="debug"):
                get_settings()
        finally:
            get_settings.cache_clear()


async def test_cors_preflight_allows_configured_origin(client: AsyncClient) -> None:
    response = await client.options(
        "/api/v1/search",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


async def test_cors_rejects_unknown_origin(client: AsyncClient) -> None:
    response = await client.options(
        "/api/v1/search",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert "access-control-allow-origin" not in response.headers


async def test_error_body_echoes_request_id(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/search",
        params={"q": "doe", "scope": "users"},
        headers={"X-Request-ID": "trace-me-42"},
    )
    assert response.status_code == 422
    body = response.json()
    assert body["request_id"] == "trace-me-42"
    assert response.headers["x-request-id"] == "trace-me-42"
