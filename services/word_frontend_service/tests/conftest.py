"""Shared fixtures for Word Frontend Service tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from services.word_frontend_service.app import create_app
from services.word_frontend_service.config import WordFrontendSettings

BACKEND_URL = "http://definitions-api.test"
FRONTEND_URL = "http://localhost:8000"

STATIC_FILES: dict[str, bytes] = {
    "index.html": b"<!DOCTYPE html><title>index</title>",
    "store.html": b"<!DOCTYPE html><title>store</title>",
    "search.html": b"<!DOCTYPE html><title>search</title>",
    "store.js": b"console.log('store');",
    "style.css": b"body { margin: 0; }",
    "assets/logo.png": b"\x89PNG\r\n\x1a\n\x00\x01",
}


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """Static root populated with a small set of assets, plus a file outside it."""
    root = tmp_path / "public"
    for name, data in STATIC_FILES.items():
        target = root / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    (tmp_path / "secret.txt").write_bytes(b"top secret")
    return root


@pytest.fixture
def settings(static_dir: Path) -> WordFrontendSettings:
    return WordFrontendSettings(
        BACKEND_URL=BACKEND_URL,
        FRONTEND_URL=FRONTEND_URL,
        STATIC_DIR=static_dir,
        ENVIRONMENT="testing",
    )


@pytest.fixture
async def app(settings: WordFrontendSettings) -> AsyncIterator[FastAPI]:
    app = create_app(settings)
    yield app
    await app.state.di_container.close()


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Test client talking to the app in-process; the backend is mocked with respx."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
