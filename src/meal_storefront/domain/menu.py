"""Domain models for the menu catalog."""

from dataclasses import dataclass
from datetime import datetime
from typing import Final

WEEKDAY_BREAKFAST: Final = "weekday-breakfast"
WEEKDAY_LUNCH: Final = "weekday-lunch"
WEEKEND_BREAKFAST: Final = "weekend-breakfast"
WEEKEND_LUNCH: Final = "weekend-lunch"

MEAL_TYPES: Final = (
    WEEKDAY_BREAKFAST,
    WEEKDAY_LUNCH,
    WEEKEND_BREAKFAST,
    WEEKEND_LUNCH,
)


@dataclass(frozen=True)
class MenuItem:
    """A dish offered in the storefront menu."""

    id: int
    name: str
    description: str
    price: float
    meal_type: str
    image_url: str
    created_at: datetime


@dataclass(frozen=True)
class MenuItemDraft:
    """Field values for creating or overwriting a menu item."""

    name: str
    description: str = ""
    price: float = 0.0
    meal_type: str = ""
    image_url: str = ""
