"""Error handling for Word Frontend Service.

Domain exceptions are raised through the ``raise_*`` helpers and turned into
client responses by the handlers installed with ``register_error_handlers``.
Route code never builds error responses itself.
"""

from __future__ import annotations

from typing import Any, NoReturn
from uuid import UUID

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from services.word_frontend_service.logging_utils import create_service_logger

logger = create_service_logger("word_frontend.error_handling")

NOT_FOUND_BODY = b"404 Not Found"


class WordFrontendError(Exception):
    """Base exception carrying structured context for logging and responses."""

    def __init__(
        self,
        *,
        service: str,
        operation: str,
        message: str,
        correlation_id: UUID | None = None,
    ) -> None:
        super().__init__(message)
        self.service = service
        self.operation = operation
        self.message = message
        self.correlation_id = correlation_id

    def __str__(self) -> str:
        return self.message


class BackendUnavailableError(WordFrontendError):
    """The backend API could not be reached or returned a body that is not JSON."""

    def __init__(self, *, backend_url: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.backend_url = backend_url


class StaticAssetNotFoundError(WordFrontendError):
    """A static asset is missing, unreadable, or outside the static root."""

    def __init__(self, *, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.path = path
        self.reason = reason


def raise_backend_unavailable(
    *,
    service: str,
    operation: str,
    backend_url: str,
    message: str,
    correlation_id: UUID | None = None,
) -> NoReturn:
    raise BackendUnavailableError(
        service=service,
        operation=operation,
        backend_url=backend_url,
        message=message,
        correlation_id=correlation_id,
    )


def raise_static_asset_not_found(
    *,
    service: str,
    operation: str,
    path: str,
    reason: str,
    correlation_id: UUID | None = None,
) -> NoReturn:
    raise StaticAssetNotFoundError(
        service=service,
        operation=operation,
        path=path,
        reason=reason,
        message=f"Static asset not found: {path}",
        correlation_id=correlation_id,
    )


def backend_unavailable_payload(backend_url: str) -> dict[str, Any]:
    """Envelope returned to the browser when the backend round trip fails."""
    return {
        "success": False,
        "message": f"Server Error: Could not connect to the external API server on {backend_url}.",
    }


def not_found_response() -> Response:
    # Explicit header keeps Starlette from appending a charset parameter.
    return Response(content=NOT_FOUND_BODY, status_code=404, headers={"Content-Type": "text/plain"})


def register_error_handlers(app: FastAPI) -> None:
    """Install the service's exception handlers on a FastAPI app."""

    @app.exception_handler(BackendUnavailableError)
    async def handle_backend_unavailable(
        request: Request, exc: BackendUnavailableError
    ) -> JSONResponse:
        return JSONResponse(status_code=500, content=backend_unavailable_payload(exc.backend_url))

    @app.exception_handler(StaticAssetNotFoundError)
    async def handle_static_asset_not_found(
        request: Request, exc: StaticAssetNotFoundError
    ) -> Response:
        logger.debug(
            f"Static asset not found: {exc.path!r} ({exc.reason})",
            extra={
                "path": exc.path,
                "reason": exc.reason,
                "service": exc.service,
                "operation": exc.operation,
                "correlation_id": str(exc.correlation_id),
            },
        )
        return not_found_response()

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
        # Unmatched paths and unsupported methods share the generic 404.
        if exc.status_code in (404, 405):
            return not_found_response()
        return await http_exception_handler(request, exc)
