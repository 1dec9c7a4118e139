"""Proxy routes for the backend definitions API.

``GET /search`` looks a word up and ``POST /store`` submits one. Both relay
the backend's status code and JSON body back to the browser.
"""

from __future__ import annotations

from typing import NoReturn
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response
from httpx import HTTPError

from services.word_frontend_service.config import WordFrontendSettings
from services.word_frontend_service.error_handling import raise_backend_unavailable
from services.word_frontend_service.logging_utils import create_service_logger
from services.word_frontend_service.models import BackendRelay
from services.word_frontend_service.protocols import DefinitionsClientProtocol

router = APIRouter(route_class=DishkaRoute)
logger = create_service_logger("word_frontend.proxy_routes")

SEARCH_PAGE = "/search.html"


def relay_response(relay: BackendRelay) -> JSONResponse:
    """Re-serialize the backend's JSON body under its original status code."""
    return JSONResponse(status_code=relay.status_code, content=relay.payload)


def _backend_failed(
    route: str, error: Exception, config: WordFrontendSettings, correlation_id: UUID
) -> NoReturn:
    logger.error(
        f"[Proxy Error] Failed to connect to external API {config.BACKEND_URL} for {route}: {error}",
        extra={
            "route": route,
            "error": str(error),
            "error_type": type(error).__name__,
            "correlation_id": str(correlation_id),
        },
    )
    raise_backend_unavailable(
        service="word_frontend_service",
        operation=route,
        backend_url=config.BACKEND_URL,
        message=f"Could not reach definitions API for {route}: {error}",
        correlation_id=correlation_id,
    )


@router.get("/search", include_in_schema=False, response_model=None)
async def search_definitions(
    request: Request,
    definitions_client: FromDishka[DefinitionsClientProtocol],
    config: FromDishka[WordFrontendSettings],
    correlation_id: FromDishka[UUID],
) -> Response:
    """Look up a word, or send the browser to the search page when none is given."""
    # First occurrence wins when the parameter is repeated.
    words = request.query_params.getlist("word")
    word = words[0] if words else ""
    if not word:
        return RedirectResponse(SEARCH_PAGE, status_code=302)

    try:
        relay = await definitions_client.lookup(word, correlation_id)
    except (HTTPError, ValueError) as e:
        _backend_failed("search", e, config, correlation_id)

    return relay_response(relay)


@router.post("/store", include_in_schema=False, response_model=None)
async def store_definition(
    request: Request,
    definitions_client: FromDishka[DefinitionsClientProtocol],
    config: FromDishka[WordFrontendSettings],
    correlation_id: FromDishka[UUID],
) -> Response:
    """Forward the buffered request body unchanged to the definitions API."""
    body = await request.body()

    try:
        relay = await definitions_client.submit(body, correlation_id)
    except (HTTPError, ValueError) as e:
        _backend_failed("store", e, config, correlation_id)

    return relay_response(relay)
