"""Dependency Injection providers for Word Frontend Service.

Provides Dishka DI container setup with APP-scoped infrastructure
and REQUEST-scoped context providers.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID, uuid4

import httpx
from dishka import Provider, Scope, provide
from fastapi import Request

from services.word_frontend_service.clients.definitions_client import DefinitionsClientImpl
from services.word_frontend_service.config import WordFrontendSettings
from services.word_frontend_service.implementations.static_asset_store import StaticAssetStore
from services.word_frontend_service.protocols import (
    DefinitionsClientProtocol,
    StaticAssetStoreProtocol,
)


class WordFrontendProvider(Provider):
    """Infrastructure provider for Word Frontend Service.

    Provides APP-scoped dependencies: config, HTTP client, definitions client
    and static asset store.
    """

    scope = Scope.APP

    def __init__(self, settings: WordFrontendSettings) -> None:
        super().__init__()
        self._settings = settings

    @provide
    def get_config(self) -> WordFrontendSettings:
        """Provide the settings built at startup."""
        return self._settings

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, config: WordFrontendSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide shared HTTP client with connection pooling."""
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(
                config.HTTP_CLIENT_TIMEOUT_SECONDS,
                connect=config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
            ),
            follow_redirects=True,
        ) as client:
            yield client

    @provide(scope=Scope.APP)
    def provide_definitions_client(
        self, http_client: httpx.AsyncClient, config: WordFrontendSettings
    ) -> DefinitionsClientProtocol:
        """Provide definitions API client singleton."""
        return DefinitionsClientImpl(http_client, config.BACKEND_URL)

    @provide(scope=Scope.APP)
    def provide_static_asset_store(self, config: WordFrontendSettings) -> StaticAssetStoreProtocol:
        """Provide static asset store rooted at the configured directory."""
        return StaticAssetStore(config.STATIC_DIR)


class RequestContextProvider(Provider):
    """Request-scoped provider for correlation context.

    Reads the correlation ID set by CorrelationIDMiddleware. The Request itself
    is supplied by dishka's FastapiProvider.
    """

    @provide(scope=Scope.REQUEST)
    def provide_correlation_id(self, request: Request) -> UUID:
        """Provide correlation ID from request state."""
        return getattr(request.state, "correlation_id", uuid4())
