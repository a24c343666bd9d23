"""Storefront analytics."""

from dataclasses import dataclass

from meal_storefront.domain.analytics import AnalyticsSummary, TopItem
from meal_storefront.services.menu import MenuRepository
from meal_storefront.services.recommendations import OrderRepository
from meal_storefront.services.subscriptions import SubscriberRepository

TOP_ITEMS_LIMIT = 6
RECENT_SUBSCRIBERS_LIMIT = 10


@dataclass
class AnalyticsService:
    """Computes subscriber totals and order popularity."""

    subscriber_repository: SubscriberRepository
    order_repository: OrderRepository
    menu_repository: MenuRepository

    def summarize(self, include_recent_subscribers: bool = False) -> AnalyticsSummary:
        """Return aggregate stats.

        Recent subscribers are only loaded when the caller has been
        authorized for them.
        """
        recent = None
        if include_recent_subscribers:
            recent = self.subscriber_repository.list_subscribers(
                limit=RECENT_SUBSCRIBERS_LIMIT
            )
        return AnalyticsSummary(
            total_subscribers=self.subscriber_repository.count_subscribers(),
            active_subscribers=self.subscriber_repository.count_subscribers(
                active_only=True
            ),
            top_items=self._top_items(),
            recent_subscribers=recent,
        )

    def _top_items(self) -> list[TopItem]:
        top = []
        for count in self.order_repository.top_items(TOP_ITEMS_LIMIT):
            item = self.menu_repository.get_item(count.menu_item_id)
            if item is None:
                continue
            top.append(TopItem(name=item.name, count=count.count))
        return top
