"""Domain models for storefront analytics."""

from dataclasses import dataclass

from meal_storefront.domain.subscribers import Subscriber


@dataclass(frozen=True)
class TopItem:
    """A popular menu item and how often it was ordered."""

    name: str
    count: int


@dataclass(frozen=True)
class AnalyticsSummary:
    """Aggregate storefront stats, optionally with admin-only detail."""

    total_subscribers: int
    active_subscribers: int
    top_items: list[TopItem]
    recent_subscribers: list[Subscriber] | None = None
