"""Protocol definitions for Word Frontend Service.

Defines interfaces for the collaborators used in dependency injection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from services.word_frontend_service.models import BackendRelay, StaticAsset


class DefinitionsClientProtocol(Protocol):
    """Protocol for the backend definitions API HTTP client."""

    async def lookup(self, word: str, correlation_id: UUID) -> BackendRelay:
        """Look up the definitions of a word.

        Args:
            word: Word to look up (unencoded)
            correlation_id: Request correlation ID for tracing

        Returns:
            Backend status code and parsed JSON body

        Raises:
            httpx.HTTPError: When the backend cannot be reached
            ValueError: When the backend body is not JSON
        """
        ...

    async def submit(self, body: bytes, correlation_id: UUID) -> BackendRelay:
        """Forward a word submission body unchanged to the backend.

        Args:
            body: Raw JSON request body received from the browser
            correlation_id: Request correlation ID for tracing

        Returns:
            Backend status code and parsed JSON body
        """
        ...


class StaticAssetStoreProtocol(Protocol):
    """Protocol for reading files from the static root."""

    async def read_asset(self, relative_path: str, correlation_id: UUID) -> StaticAsset:
        """Read a file below the static root.

        Raises:
            StaticAssetNotFoundError: If the file is missing, unreadable, or
                resolves outside the static root
        """
        ...
