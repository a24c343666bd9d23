"""Admin API endpoints gated by the shared admin password."""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from typing import TYPE_CHECKING, Any

from fastapi import (
    APIRouter,
    File,
    HTTPException,
    Request,
    Response,
    UploadFile,
    status,
)
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from meal_storefront.api.models import (
    MenuItemPayload,
    MenuItemResponse,
    OkResponse,
    SubscriberResponse,
    UploadResponse,
)
from meal_storefront.services.errors import MenuItemNotFoundError, StoreError
from meal_storefront.services.menu import parse_item_id

if TYPE_CHECKING:
    from meal_storefront.containers import AppContainer

logger = logging.getLogger(__name__)

ADMIN_PASSWORD_HEADER = "x-admin-pw"


def _get_container(request: Request) -> AppContainer:
    return request.app.state.container


class AdminRoute(APIRoute):
    """Route that checks the admin password before the body is read."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def gated_handler(request: Request) -> Response:
            container = _get_container(request)
            if not container.admin_access.is_authorized(
                request.headers.get(ADMIN_PASSWORD_HEADER)
            ):
                return JSONResponse(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    content={"detail": "unauthorized"},
                )
            return await handler(request)

        return gated_handler


router = APIRouter(prefix="/admin", tags=["admin"], route_class=AdminRoute)


@router.post(
    "/menu", status_code=status.HTTP_201_CREATED, response_model=MenuItemResponse
)
def add_menu_item(payload: MenuItemPayload, request: Request) -> MenuItemResponse:
    """Add a dish to the menu."""
    container = _get_container(request)
    try:
        item = container.menu_service.create_item(payload.to_draft())
    except StoreError:
        logger.exception("Failed to create menu item")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="create failed"
        ) from None
    return MenuItemResponse.model_validate(item)


@router.put("/menu/{item_id}", response_model=MenuItemResponse)
def edit_menu_item(
    item_id: str, payload: MenuItemPayload, request: Request
) -> MenuItemResponse:
    """Overwrite a dish; an empty image_url keeps the current image."""
    container = _get_container(request)
    try:
        item = container.menu_service.update_item(
            parse_item_id(item_id), payload.to_draft()
        )
    except MenuItemNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="not found"
        ) from None
    except StoreError:
        logger.exception("Failed to update menu item %s", item_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="update failed"
        ) from None
    return MenuItemResponse.model_validate(item)


@router.delete("/menu/{item_id}", response_model=OkResponse)
def delete_menu_item(item_id: str, request: Request) -> OkResponse:
    """Remove a dish. Unknown numeric ids succeed silently."""
    container = _get_container(request)
    try:
        container.menu_service.delete_item(parse_item_id(item_id))
    except MenuItemNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="not found"
        ) from None
    except StoreError:
        logger.exception("Failed to delete menu item %s", item_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="delete failed"
        ) from None
    return OkResponse()


@router.post("/upload", response_model=UploadResponse)
def upload_image(
    request: Request, file: UploadFile | None = File(default=None)
) -> UploadResponse:
    """Store an image under /uploads and return its URL."""
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="no file")
    container = _get_container(request)
    try:
        url = container.upload_service.save(file.filename, file.file)
    except OSError:
        logger.exception("Failed to store upload %s", file.filename)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="save failed"
        ) from None
    return UploadResponse(url=url)


@router.get("/subscribers", response_model=list[SubscriberResponse])
def list_subscribers(request: Request) -> list[SubscriberResponse]:
    """Return every subscriber, newest first."""
    container = _get_container(request)
    return [
        SubscriberResponse.model_validate(subscriber)
        for subscriber in container.subscription_service.list_subscribers()
    ]
