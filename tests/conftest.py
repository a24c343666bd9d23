"""Shared test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from meal_storefront.api.app import create_app
from meal_storefront.config import Settings
from meal_storefront.containers import AppContainer, build_container
from meal_storefront.domain.menu import MenuItem, MenuItemDraft
from meal_storefront.domain.orders import ItemOrderCount, OrderRecord
from meal_storefront.domain.subscribers import Subscriber
from meal_storefront.services.menu import MenuRepository
from meal_storefront.services.recommendations import OrderRepository
from meal_storefront.services.subscriptions import SubscriberRepository

ADMIN_PASSWORD = "admin-pw"
ADMIN_HEADERS = {"x-admin-pw": ADMIN_PASSWORD}


@dataclass
class InMemoryMenuRepository(MenuRepository):
    """In-memory menu repository for tests."""

    items: dict[int, MenuItem] = field(default_factory=dict)
    next_id: int = 1

    def list_items(self, meal_type: str | None = None) -> list[MenuItem]:
        items = sorted(
            self.items.values(), key=lambda i: (i.created_at, i.id), reverse=True
        )
        if meal_type is None:
            return items
        return [item for item in items if item.meal_type == meal_type]

    def get_item(self, item_id: int) -> MenuItem | None:
        return self.items.get(item_id)

    def get_items(self, item_ids: list[int]) -> list[MenuItem]:
        return [self.items[i] for i in item_ids if i in self.items]

    def list_cheapest(self, limit: int) -> list[MenuItem]:
        return sorted(self.items.values(), key=lambda i: (i.price, i.id))[:limit]

    def create_item(self, draft: MenuItemDraft) -> MenuItem:
        item = MenuItem(
            id=self.next_id,
            name=draft.name,
            description=draft.description,
            price=draft.price,
            meal_type=draft.meal_type,
            image_url=draft.image_url,
            created_at=datetime.now(tz=UTC),
        )
        self.items[item.id] = item
        self.next_id += 1
        return item

    def create_items(self, drafts: list[MenuItemDraft]) -> list[MenuItem]:
        return [self.create_item(draft) for draft in drafts]

    def update_item(self, item_id: int, draft: MenuItemDraft) -> MenuItem | None:
        existing = self.items.get(item_id)
        if existing is None:
            return None
        updated = MenuItem(
            id=item_id,
            name=draft.name,
            description=draft.description,
            price=draft.price,
            meal_type=draft.meal_type,
            image_url=draft.image_url or existing.image_url,
            created_at=existing.created_at,
        )
        self.items[item_id] = updated
        return updated

    def delete_item(self, item_id: int) -> None:
        self.items.pop(item_id, None)

    def count_items(self) -> int:
        return len(self.items)


@dataclass
class InMemorySubscriberRepository(SubscriberRepository):
    """In-memory subscriber repository for tests."""

    subscribers: list[Subscriber] = field(default_factory=list)

    def create_subscriber(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        plan: str,
        start_date: datetime,
        end_date: datetime,
        active: bool,
    ) -> Subscriber:
        subscriber = Subscriber(
            id=len(self.subscribers) + 1,
            name=name,
            email=email,
            plan=plan,
            start_date=start_date,
            end_date=end_date,
            active=active,
            created_at=datetime.now(tz=UTC),
        )
        self.subscribers.append(subscriber)
        return subscriber

    def list_subscribers(self, limit: int | None = None) -> list[Subscriber]:
        ordered = list(reversed(self.subscribers))
        return ordered if limit is None else ordered[:limit]

    def count_subscribers(self, active_only: bool = False) -> int:
        if active_only:
            return sum(1 for s in self.subscribers if s.active)
        return len(self.subscribers)


@dataclass
class InMemoryOrderRepository(OrderRepository):
    """In-memory order repository for tests."""

    orders: list[OrderRecord] = field(default_factory=list)

    def top_items(self, limit: int) -> list[ItemOrderCount]:
        counts: dict[int, int] = {}
        for order in self.orders:
            counts[order.menu_item_id] = counts.get(order.menu_item_id, 0) + 1
        ranked = sorted(counts.items(), key=lambda pair: (-pair[1], pair[0]))
        return [
            ItemOrderCount(menu_item_id=item_id, count=count)
            for item_id, count in ranked[:limit]
        ]

    def create_order(
        self, subscriber_id: int, menu_item_id: int, date: datetime
    ) -> OrderRecord:
        order = OrderRecord(
            id=len(self.orders) + 1,
            subscriber_id=subscriber_id,
            menu_item_id=menu_item_id,
            date=date,
        )
        self.orders.append(order)
        return order


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        admin_password=ADMIN_PASSWORD,
        database_url="sqlite://",
        uploads_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def container(settings: Settings) -> Iterator[AppContainer]:
    container = build_container(settings)
    yield container
    container.close_resources()


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
