"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from meal_storefront.adapters.database import Database
from meal_storefront.adapters.local_upload_store import LocalUploadStore
from meal_storefront.adapters.sqlalchemy_menu_repository import (
    SqlAlchemyMenuRepository,
)
from meal_storefront.adapters.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)
from meal_storefront.adapters.sqlalchemy_subscriber_repository import (
    SqlAlchemySubscriberRepository,
)
from meal_storefront.config import Settings
from meal_storefront.services.access import AdminAccess
from meal_storefront.services.analytics import AnalyticsService
from meal_storefront.services.menu import MenuService
from meal_storefront.services.recommendations import RecommendationService
from meal_storefront.services.seed import SeedLoader
from meal_storefront.services.subscriptions import SubscriptionService
from meal_storefront.services.uploads import UploadService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    database: Database
    admin_access: AdminAccess
    menu_service: MenuService
    subscription_service: SubscriptionService
    recommendation_service: RecommendationService
    analytics_service: AnalyticsService
    upload_store: LocalUploadStore
    upload_service: UploadService
    order_repository: SqlAlchemyOrderRepository
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Creates missing tables and the uploads directory, then seeds the menu
    when it is empty.
    """
    resolved_settings = settings or Settings()
    database = Database(resolved_settings.database_url)
    database.create_schema()

    menu_repository = SqlAlchemyMenuRepository(database)
    subscriber_repository = SqlAlchemySubscriberRepository(database)
    order_repository = SqlAlchemyOrderRepository(database)
    SeedLoader(menu_repository).load()

    upload_store = LocalUploadStore(Path(resolved_settings.uploads_dir))

    return AppContainer(
        settings=resolved_settings,
        database=database,
        admin_access=AdminAccess(resolved_settings.admin_password),
        menu_service=MenuService(menu_repository),
        subscription_service=SubscriptionService(subscriber_repository),
        recommendation_service=RecommendationService(
            order_repository=order_repository,
            menu_repository=menu_repository,
        ),
        analytics_service=AnalyticsService(
            subscriber_repository=subscriber_repository,
            order_repository=order_repository,
            menu_repository=menu_repository,
        ),
        upload_store=upload_store,
        upload_service=UploadService(upload_store),
        order_repository=order_repository,
        close_resources=database.dispose,
    )
