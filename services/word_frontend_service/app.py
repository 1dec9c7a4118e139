"""Word Frontend Service - Static file serving and definitions API proxy.

Serves the pre-built store/search pages and forwards word lookups and word
submissions to the backend definitions API, relaying its JSON responses.
"""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI
from pydantic import ValidationError

from services.word_frontend_service.api.proxy_routes import router as proxy_router
from services.word_frontend_service.api.static_routes import router as static_router
from services.word_frontend_service.config import HTTP_PORT, WordFrontendSettings
from services.word_frontend_service.di import RequestContextProvider, WordFrontendProvider
from services.word_frontend_service.error_handling import register_error_handlers
from services.word_frontend_service.logging_utils import (
    configure_service_logging,
    create_service_logger,
)
from services.word_frontend_service.middleware import CorrelationIDMiddleware

logger = create_service_logger("word_frontend.app")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Announce the public URLs on startup and release the DI container on shutdown."""
    settings: WordFrontendSettings = app.state.settings
    logger.info(f"Front-End Proxy Server running on {settings.FRONTEND_URL}")
    logger.info(f"Access store page: {settings.FRONTEND_URL}/store.html")
    logger.info(f"Access search page: {settings.FRONTEND_URL}/search.html")

    yield

    logger.info("Shutting down Word Frontend Service...")
    await app.state.di_container.close()


def create_app(settings: WordFrontendSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Settings are read from the environment when not given; construction fails
    if the backend or frontend URL is missing or malformed.
    """
    if settings is None:
        settings = WordFrontendSettings()

    # Docs and slash redirects would shadow static paths.
    app = FastAPI(
        title=settings.SERVICE_NAME,
        version="0.1.0",
        description="Word Frontend Service - Static pages and definitions API proxy",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_error_handlers(app)
    app.add_middleware(CorrelationIDMiddleware)

    if not settings.STATIC_DIR.is_dir():
        logger.warning(f"Static directory not found: {settings.STATIC_DIR}")

    app.include_router(proxy_router)
    # Static catch-all must come after every other route
    app.include_router(static_router)

    container = make_async_container(
        WordFrontendProvider(settings),
        RequestContextProvider(),
        FastapiProvider(),
    )
    setup_dishka(container, app)
    app.state.di_container = container

    return app


def main() -> None:
    """Run the service with uvicorn on the fixed port."""
    try:
        settings = WordFrontendSettings()
    except ValidationError as e:
        configure_service_logging("word-frontend-service")
        logger.critical(f"Invalid configuration, refusing to start: {e}")
        sys.exit(1)

    configure_service_logging(
        settings.SERVICE_NAME,
        environment=settings.ENVIRONMENT.value,
        log_level=settings.LOG_LEVEL,
    )

    import uvicorn

    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=HTTP_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
