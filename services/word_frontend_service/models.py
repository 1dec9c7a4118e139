"""Transient per-request value objects for Word Frontend Service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BackendRelay(BaseModel):
    """Status code and parsed JSON body of a backend definitions API response."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(description="HTTP status returned by the backend")
    payload: Any = Field(default=None, description="Backend body, parsed from JSON")


class StaticAsset(BaseModel):
    """File contents read from the static root."""

    model_config = ConfigDict(frozen=True)

    body: bytes
    content_type: str
