"""Menu catalog business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_storefront.domain.menu import MenuItem, MenuItemDraft
from meal_storefront.services.errors import MenuItemNotFoundError

logger = logging.getLogger(__name__)


class MenuRepository(Protocol):
    """Persistence interface for menu items."""

    def list_items(self, meal_type: str | None = None) -> list[MenuItem]:
        """Return items newest first, optionally filtered by meal type."""

    def get_item(self, item_id: int) -> MenuItem | None:
        """Return the item with the given id, if present."""

    def get_items(self, item_ids: list[int]) -> list[MenuItem]:
        """Return the items whose ids are in the list, in any order."""

    def list_cheapest(self, limit: int) -> list[MenuItem]:
        """Return the cheapest items, ascending by price."""

    def create_item(self, draft: MenuItemDraft) -> MenuItem:
        """Insert a new item and return it with its generated id."""

    def create_items(self, drafts: list[MenuItemDraft]) -> list[MenuItem]:
        """Insert several items atomically, returning them in input order."""

    def update_item(self, item_id: int, draft: MenuItemDraft) -> MenuItem | None:
        """Overwrite an item in place, returning None when the id is unknown."""

    def delete_item(self, item_id: int) -> None:
        """Delete an item; unknown ids are ignored."""

    def count_items(self) -> int:
        """Return the number of menu items."""


def parse_item_id(raw: str) -> int:
    """Turn a path segment into a menu item id.

    Anything that is not a plain non-negative integer cannot name an item,
    so it raises ``MenuItemNotFoundError`` like an unknown id would.
    """
    if not raw.isascii() or not raw.isdigit():
        raise MenuItemNotFoundError(raw)
    return int(raw)


@dataclass
class MenuService:
    """Application service for browsing and curating the menu."""

    repository: MenuRepository

    def list_menu(self, meal_type: str | None = None) -> list[MenuItem]:
        """List menu items, newest first.

        An empty ``meal_type`` is treated the same as no filter.
        """
        return self.repository.list_items(meal_type or None)

    def get_item(self, item_id: int) -> MenuItem:
        """Return a single item or raise ``MenuItemNotFoundError``."""
        item = self.repository.get_item(item_id)
        if item is None:
            raise MenuItemNotFoundError(item_id)
        return item

    def create_item(self, draft: MenuItemDraft) -> MenuItem:
        """Add an item to the menu."""
        item = self.repository.create_item(draft)
        logger.info("Created menu item %s (%s)", item.id, item.meal_type)
        return item

    def update_item(self, item_id: int, draft: MenuItemDraft) -> MenuItem:
        """Overwrite an item's fields.

        Name, description, price and meal type are always replaced. The image
        URL is only replaced when the draft carries a non-empty one.
        """
        item = self.repository.update_item(item_id, draft)
        if item is None:
            raise MenuItemNotFoundError(item_id)
        logger.info("Updated menu item %s", item_id)
        return item

    def delete_item(self, item_id: int) -> None:
        """Remove an item from the menu."""
        self.repository.delete_item(item_id)
        logger.info("Deleted menu item %s", item_id)
