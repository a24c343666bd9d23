"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Header, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from meal_storefront.api.admin import router as admin_router
from meal_storefront.api.models import (
    AnalyticsResponse,
    MenuItemResponse,
    MenuListResponse,
    SubscribePayload,
    SubscribeResponse,
    SubscriberResponse,
)
from meal_storefront.app_logging import configure_logging
from meal_storefront.containers import AppContainer
from meal_storefront.services.errors import MenuItemNotFoundError, StoreError
from meal_storefront.services.menu import parse_item_id

CORS_MAX_AGE_SECONDS = 12 * 60 * 60


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        app.state.container.close_resources()

    app = FastAPI(title="Meal Storefront API", lifespan=lifespan)
    app.state.container = container

    # the mobile client is served from arbitrary origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Authorization", "x-admin-pw"],
        max_age=CORS_MAX_AGE_SECONDS,
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _format_validation_errors(exc.errors())},
        )

    app.include_router(admin_router)
    app.mount(
        "/uploads",
        StaticFiles(directory=container.upload_store.root),
        name="uploads",
    )

    @app.get("/health")
    def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/menus", response_model=MenuListResponse)
    def list_menus(request: Request, meal_type: str | None = None) -> MenuListResponse:
        """List the menu, optionally restricted to one meal type."""
        state_container: AppContainer = request.app.state.container
        items = state_container.menu_service.list_menu(meal_type)
        return MenuListResponse(
            items=[MenuItemResponse.model_validate(item) for item in items]
        )

    @app.get("/menus/{item_id}", response_model=MenuItemResponse)
    def get_menu(item_id: str, request: Request) -> MenuItemResponse:
        """Return one menu item."""
        state_container: AppContainer = request.app.state.container
        try:
            item = state_container.menu_service.get_item(parse_item_id(item_id))
        except MenuItemNotFoundError:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="not found"
            ) from None
        return MenuItemResponse.model_validate(item)

    @app.post(
        "/subscribe",
        status_code=status.HTTP_201_CREATED,
        response_model=SubscribeResponse,
    )
    def subscribe(payload: SubscribePayload, request: Request) -> SubscribeResponse:
        """Sign a customer up for a 30-day plan."""
        state_container: AppContainer = request.app.state.container
        try:
            subscriber = state_container.subscription_service.subscribe(
                name=payload.name, email=str(payload.email), plan=payload.plan
            )
        except StoreError:
            logger.exception("Failed to save subscriber")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="unable to save subscriber",
            ) from None
        return SubscribeResponse(
            subscriber=SubscriberResponse.model_validate(subscriber)
        )

    @app.get(
        "/analytics",
        response_model=AnalyticsResponse,
        response_model_exclude_none=True,
    )
    def analytics(
        request: Request, x_admin_pw: str | None = Header(default=None)
    ) -> AnalyticsResponse:
        """Return storefront stats; admins also get recent subscribers."""
        state_container: AppContainer = request.app.state.container
        is_admin = state_container.admin_access.is_authorized(x_admin_pw)
        summary = state_container.analytics_service.summarize(
            include_recent_subscribers=is_admin
        )
        return AnalyticsResponse.model_validate(summary)

    @app.get("/recommendations", response_model=MenuListResponse)
    def recommendations(request: Request) -> MenuListResponse:
        """Return up to five popular dishes."""
        state_container: AppContainer = request.app.state.container
        items = state_container.recommendation_service.recommend()
        return MenuListResponse(
            items=[MenuItemResponse.model_validate(item) for item in items]
        )

    return app


def _format_validation_errors(errors: list[dict[str, object]]) -> str:
    messages = []
    for error in errors:
        if error.get("type") == "json_invalid":
            messages.append("invalid JSON")
            continue
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body"
        )
        message = str(error.get("msg", "invalid value"))
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)
