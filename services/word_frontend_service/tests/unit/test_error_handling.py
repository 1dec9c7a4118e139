"""Unit tests for Word Frontend Service error handling."""

from __future__ import annotations

from uuid import uuid4

import pytest
from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient
from structlog.testing import capture_logs

from services.word_frontend_service.error_handling import (
    BackendUnavailableError,
    StaticAssetNotFoundError,
    backend_unavailable_payload,
    raise_backend_unavailable,
    raise_static_asset_not_found,
    register_error_handlers,
)

MISSING_ASSET_CORRELATION_ID = uuid4()


def test_backend_unavailable_payload() -> None:
    assert backend_unavailable_payload("http://api.example.com") == {
        "success": False,
        "message": "Server Error: Could not connect to the external API server on "
        "http://api.example.com.",
    }


def test_raise_backend_unavailable_carries_context() -> None:
    correlation_id = uuid4()

    with pytest.raises(BackendUnavailableError) as exc_info:
        raise_backend_unavailable(
            service="word_frontend_service",
            operation="search",
            backend_url="http://api.example.com",
            message="connection refused",
            correlation_id=correlation_id,
        )

    error = exc_info.value
    assert error.operation == "search"
    assert error.backend_url == "http://api.example.com"
    assert error.correlation_id == correlation_id
    assert str(error) == "connection refused"


def test_raise_static_asset_not_found_carries_context() -> None:
    with pytest.raises(StaticAssetNotFoundError) as exc_info:
        raise_static_asset_not_found(
            service="word_frontend_service",
            operation="read_asset",
            path="missing.html",
            reason="No such file or directory",
        )

    assert exc_info.value.path == "missing.html"
    assert exc_info.value.reason == "No such file or directory"
    assert "missing.html" in str(exc_info.value)


@pytest.fixture
async def error_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/teapot")
    async def teapot() -> None:
        raise HTTPException(status_code=418, detail="short and stout")

    @app.get("/missing-asset")
    async def missing_asset() -> None:
        raise_static_asset_not_found(
            service="test",
            operation="read_asset",
            path="missing.html",
            reason="No such file or directory",
            correlation_id=MISSING_ASSET_CORRELATION_ID,
        )

    @app.get("/backend-down")
    async def backend_down() -> None:
        raise_backend_unavailable(
            service="test",
            operation="search",
            backend_url="http://api.example.com",
            message="down",
        )

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_other_http_errors_keep_default_handling(error_client: AsyncClient) -> None:
    response = await error_client.get("/teapot")

    assert response.status_code == 418
    assert response.json() == {"detail": "short and stout"}


@pytest.mark.asyncio
async def test_backend_unavailable_handler(error_client: AsyncClient) -> None:
    response = await error_client.get("/backend-down")

    assert response.status_code == 500
    assert response.json() == backend_unavailable_payload("http://api.example.com")


@pytest.mark.asyncio
async def test_unknown_route_and_wrong_method_are_plain_404(error_client: AsyncClient) -> None:
    unknown = await error_client.get("/nowhere")
    wrong_method = await error_client.post("/teapot")

    for response in (unknown, wrong_method):
        assert response.status_code == 404
        assert response.headers["content-type"] == "text/plain"
        assert response.content == b"404 Not Found"


@pytest.mark.asyncio
async def test_missing_asset_is_plain_404_and_logs_reason(error_client: AsyncClient) -> None:
    """Test that the not-found reason is logged at debug level but never sent to the client."""
    with capture_logs() as logs:
        response = await error_client.get("/missing-asset")

    assert response.status_code == 404
    assert response.headers["content-type"] == "text/plain"
    assert response.content == b"404 Not Found"

    entries = [entry for entry in logs if entry["event"].startswith("Static asset not found")]
    assert len(entries) == 1
    assert entries[0]["log_level"] == "debug"
    assert entries[0]["extra"]["reason"] == "No such file or directory"
    assert entries[0]["extra"]["correlation_id"] == str(MISSING_ASSET_CORRELATION_ID)
