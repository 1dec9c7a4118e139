"""Redirect and static file routes for Word Frontend Service."""

from __future__ import annotations

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import RedirectResponse, Response

from services.word_frontend_service.protocols import StaticAssetStoreProtocol

router = APIRouter(route_class=DishkaRoute)

STORE_PAGE = "/store.html"
INDEX_FILE = "index.html"


@router.get("/", include_in_schema=False)
@router.get("/store", include_in_schema=False)
async def redirect_to_store() -> RedirectResponse:
    return RedirectResponse(STORE_PAGE, status_code=302)


@router.get("/{full_path:path}", include_in_schema=False, response_model=None)
async def serve_static_file(
    full_path: str,
    asset_store: FromDishka[StaticAssetStoreProtocol],
    correlation_id: FromDishka[UUID],
) -> Response:
    """Serve a file from the static root.

    Must be registered after every other GET route since it matches any path.
    Missing and unreadable files raise StaticAssetNotFoundError, rendered as
    the plain-text 404.
    """
    asset = await asset_store.read_asset(full_path or INDEX_FILE, correlation_id)
    return Response(content=asset.body, headers={"Content-Type": asset.content_type})
