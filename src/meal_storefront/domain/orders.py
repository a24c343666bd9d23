"""Domain models for order statistics."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class OrderRecord:
    """A single meal ordered by a subscriber."""

    id: int
    subscriber_id: int
    menu_item_id: int
    date: datetime


@dataclass(frozen=True)
class ItemOrderCount:
    """Number of orders placed for one menu item."""

    menu_item_id: int
    count: int
