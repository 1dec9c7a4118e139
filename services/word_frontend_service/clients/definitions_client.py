"""Backend definitions API HTTP client."""

from __future__ import annotations

import json
import math
from typing import Any
from urllib.parse import quote
from uuid import UUID

import httpx

from services.word_frontend_service.logging_utils import create_service_logger
from services.word_frontend_service.models import BackendRelay

logger = create_service_logger("word_frontend.definitions_client")

DEFINITIONS_PATH = "/api/definitions/"

# Characters encodeURIComponent leaves untouched besides alphanumerics and "-_.~".
_URI_COMPONENT_SAFE = "!'()*"


def encode_uri_component(value: str) -> str:
    """Percent-encode a query value the way browsers' encodeURIComponent does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant {name!r} in backend response")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Out of range number {text!r} in backend response")
    return value


def parse_json_strict(content: bytes) -> Any:
    """Parse a JSON body, rejecting NaN, Infinity and numbers that overflow a float.

    Such values cannot be re-serialized as standard JSON.

    Raises:
        ValueError: If the body is not strict JSON
    """
    return json.loads(
        content, parse_constant=_reject_constant, parse_float=_parse_finite_float
    )


class DefinitionsClientImpl:
    """HTTP client for the backend definitions API."""

    def __init__(self, http_client: httpx.AsyncClient, backend_url: str) -> None:
        """Initialize with shared HTTP client.

        Args:
            http_client: Shared httpx AsyncClient instance
            backend_url: Backend base URL without trailing slash
        """
        self._client = http_client
        self._backend_url = backend_url

    @property
    def definitions_url(self) -> str:
        return f"{self._backend_url}{DEFINITIONS_PATH}"

    def lookup_url(self, word: str) -> str:
        return f"{self.definitions_url}?word={encode_uri_component(word)}"

    async def lookup(self, word: str, correlation_id: UUID) -> BackendRelay:
        """Look up a word on the backend and return its status and JSON body.

        Raises:
            httpx.HTTPError: On transport failures
            ValueError: If the response body is not valid JSON
        """
        url = self.lookup_url(word)

        logger.debug(
            "Looking up word on definitions API",
            extra={"url": url, "correlation_id": str(correlation_id)},
        )

        response = await self._client.get(url)
        return self._to_relay(response, correlation_id)

    async def submit(self, body: bytes, correlation_id: UUID) -> BackendRelay:
        """Forward a submission body byte-for-byte to the backend.

        Raises:
            httpx.HTTPError: On transport failures
            ValueError: If the response body is not valid JSON
        """
        logger.debug(
            "Submitting word to definitions API",
            extra={
                "url": self.definitions_url,
                "body_bytes": len(body),
                "correlation_id": str(correlation_id),
            },
        )

        response = await self._client.post(
            self.definitions_url,
            content=body,
            headers={"Content-Type": "application/json"},
        )
        return self._to_relay(response, correlation_id)

    def _to_relay(self, response: httpx.Response, correlation_id: UUID) -> BackendRelay:
        payload = parse_json_strict(response.content)

        logger.info(
            "Definitions API responded",
            extra={
                "method": response.request.method,
                "status_code": response.status_code,
                "correlation_id": str(correlation_id),
            },
        )

        return BackendRelay(status_code=response.status_code, payload=payload)
