"""Filesystem-based static asset store."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from uuid import UUID

import aiofiles

from services.word_frontend_service.error_handling import raise_static_asset_not_found
from services.word_frontend_service.models import StaticAsset

CONTENT_TYPES: dict[str, str] = {
    ".html": "text/html",
    ".js": "text/javascript",
    ".css": "text/css",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def content_type_for(path: str) -> str:
    """Map a file extension to its content type (case-sensitive)."""
    return CONTENT_TYPES.get(PurePosixPath(path).suffix, DEFAULT_CONTENT_TYPE)


class StaticAssetStore:
    """Reads assets below a fixed static root, never outside it."""

    def __init__(self, static_root: Path) -> None:
        """
        Initialize static asset store.

        Args:
            static_root: Directory containing the HTML/JS/CSS assets
        """
        self.static_root = static_root.resolve()

    def resolve_asset_path(self, relative_path: str) -> Path | None:
        """Resolve a request path below the static root.

        Returns None for anything that would escape the root, including
        ``..`` segments, absolute paths and symlinks pointing outside.
        """
        if "\x00" in relative_path or relative_path.endswith("/"):
            return None
        try:
            candidate = (self.static_root / relative_path.lstrip("/")).resolve()
        except (OSError, RuntimeError):
            return None
        if not candidate.is_relative_to(self.static_root):
            return None
        return candidate

    async def read_asset(self, relative_path: str, correlation_id: UUID) -> StaticAsset:
        """
        Read an asset and derive its content type from the requested extension.

        Raises:
            StaticAssetNotFoundError: If the asset is outside the root or cannot be read
        """
        file_path = self.resolve_asset_path(relative_path)
        if file_path is None:
            raise_static_asset_not_found(
                service="word_frontend_service",
                operation="read_asset",
                path=relative_path,
                reason="outside static root",
                correlation_id=correlation_id,
            )

        try:
            async with aiofiles.open(file_path, "rb") as f:
                data = await f.read()
        except OSError as e:
            # Missing, permission denied and directories all surface as not found.
            raise_static_asset_not_found(
                service="word_frontend_service",
                operation="read_asset",
                path=relative_path,
                reason=e.strerror or str(e),
                correlation_id=correlation_id,
            )

        return StaticAsset(body=data, content_type=content_type_for(relative_path))
