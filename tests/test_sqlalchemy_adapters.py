"""Tests for the SQLAlchemy repositories against in-memory SQLite."""

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import null

from meal_storefront.adapters.database import Database
from meal_storefront.adapters.sqlalchemy_menu_repository import (
    SqlAlchemyMenuRepository,
)
from meal_storefront.adapters.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)
from meal_storefront.adapters.sqlalchemy_subscriber_repository import (
    SqlAlchemySubscriberRepository,
)
from meal_storefront.domain.menu import WEEKDAY_LUNCH, MenuItemDraft
from meal_storefront.services.errors import StoreError


@pytest.fixture
def database() -> Iterator[Database]:
    database = Database("sqlite+pysqlite:///:memory:")
    database.create_schema()
    yield database
    database.dispose()


def test_database_requires_url() -> None:
    with pytest.raises(ValueError):
        Database("")


def test_menu_create_and_get(database: Database) -> None:
    repository = SqlAlchemyMenuRepository(database)

    created = repository.create_item(
        MenuItemDraft(name="Rice", price=12.5, meal_type=WEEKDAY_LUNCH)
    )
    fetched = repository.get_item(created.id)

    assert fetched == created
    assert fetched.price == 12.5
    assert fetched.created_at.tzinfo is not None
    assert repository.get_item(created.id + 100) is None


def test_menu_list_filters_and_orders(database: Database) -> None:
    repository = SqlAlchemyMenuRepository(database)
    first = repository.create_item(MenuItemDraft(name="A", meal_type=WEEKDAY_LUNCH))
    repository.create_item(MenuItemDraft(name="B", meal_type="weekend-lunch"))
    third = repository.create_item(MenuItemDraft(name="C", meal_type=WEEKDAY_LUNCH))

    items = repository.list_items(WEEKDAY_LUNCH)

    assert [item.id for item in items] == [third.id, first.id]
    assert len(repository.list_items()) == 3


def test_menu_cheapest_and_get_items(database: Database) -> None:
    repository = SqlAlchemyMenuRepository(database)
    ids = [
        repository.create_item(MenuItemDraft(name=str(price), price=price)).id
        for price in (30, 10, 20)
    ]

    cheapest = repository.list_cheapest(2)

    assert [item.price for item in cheapest] == [10, 20]
    assert {item.id for item in repository.get_items(ids[:2])} == set(ids[:2])
    assert repository.get_items([]) == []


def test_menu_update_is_conditional(database: Database) -> None:
    repository = SqlAlchemyMenuRepository(database)
    created = repository.create_item(
        MenuItemDraft(name="Rice", price=5, image_url="/uploads/a.png")
    )

    updated = repository.update_item(created.id, MenuItemDraft(name="Fried rice"))

    assert updated.name == "Fried rice"
    assert updated.price == 0
    assert updated.image_url == "/uploads/a.png"
    assert repository.update_item(9999, MenuItemDraft(name="Nope")) is None


def test_menu_delete_and_count(database: Database) -> None:
    repository = SqlAlchemyMenuRepository(database)
    created = repository.create_item(MenuItemDraft(name="Rice"))

    repository.delete_item(created.id)
    repository.delete_item(created.id)

    assert repository.count_items() == 0


def test_menu_create_items_returns_rows_in_order(database: Database) -> None:
    repository = SqlAlchemyMenuRepository(database)

    created = repository.create_items(
        [MenuItemDraft(name="Rice", price=3), MenuItemDraft(name="Beans", price=2)]
    )

    assert [item.name for item in created] == ["Rice", "Beans"]
    assert created[0].id < created[1].id
    assert repository.count_items() == 2


def test_menu_create_items_rolls_back_as_a_whole(database: Database) -> None:
    repository = SqlAlchemyMenuRepository(database)
    drafts = [MenuItemDraft(name="Rice"), MenuItemDraft(name=null())]

    with pytest.raises(StoreError):
        repository.create_items(drafts)

    assert repository.count_items() == 0

def test_subscriber_create_list_and_count(database: Database) -> None:
    repository = SqlAlchemySubscriberRepository(database)
    start = datetime(2026, 5, 1, tzinfo=UTC)
    for index, active in enumerate((True, False, True)):
        repository.create_subscriber(
            name=f"User{index}",
            email=f"u{index}@mealbox.ng",
            plan="p",
            start_date=start,
            end_date=start + timedelta(days=30),
            active=active,
        )

    newest = repository.list_subscribers(limit=2)

    assert [s.name for s in newest] == ["User2", "User1"]
    assert newest[0].start_date == start
    assert repository.count_subscribers() == 3
    assert repository.count_subscribers(active_only=True) == 2


def test_order_top_items(database: Database) -> None:
    repository = SqlAlchemyOrderRepository(database)
    now = datetime.now(tz=UTC)
    for item_id in (2, 1, 2, 3, 2, 1):
        repository.create_order(subscriber_id=1, menu_item_id=item_id, date=now)

    top = repository.top_items(limit=2)

    assert [(row.menu_item_id, row.count) for row in top] == [(2, 3), (1, 2)]


def test_transaction_wraps_store_errors(database: Database) -> None:
    with database.engine.begin() as connection:
        connection.exec_driver_sql("DROP TABLE subscribers")
    repository = SqlAlchemySubscriberRepository(database)
    now = datetime.now(tz=UTC)

    with pytest.raises(StoreError):
        repository.create_subscriber("Ada", "a@mealbox.ng", "p", now, now, True)
