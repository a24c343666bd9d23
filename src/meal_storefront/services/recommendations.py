"""Popularity-based menu recommendations."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from meal_storefront.domain.menu import MenuItem
from meal_storefront.domain.orders import ItemOrderCount, OrderRecord
from meal_storefront.services.menu import MenuRepository

RECOMMENDATION_LIMIT = 5


class OrderRepository(Protocol):
    """Persistence interface for order statistics."""

    def top_items(self, limit: int) -> list[ItemOrderCount]:
        """Return per-item order counts, most ordered first."""

    def create_order(
        self, subscriber_id: int, menu_item_id: int, date: datetime
    ) -> OrderRecord:
        """Record an order placed outside the HTTP surface."""


@dataclass
class RecommendationService:
    """Suggests dishes based on how often they are ordered."""

    order_repository: OrderRepository
    menu_repository: MenuRepository

    def recommend(self, limit: int = RECOMMENDATION_LIMIT) -> list[MenuItem]:
        """Return the most ordered items, or the cheapest when nothing was ordered."""
        counts = self.order_repository.top_items(limit)
        if not counts:
            return self.menu_repository.list_cheapest(limit)
        items = {
            item.id: item
            for item in self.menu_repository.get_items(
                [count.menu_item_id for count in counts]
            )
        }
        return [
            items[count.menu_item_id] for count in counts if count.menu_item_id in items
        ]
