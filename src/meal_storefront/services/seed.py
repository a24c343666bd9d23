"""Starter menu inserted into an empty catalog."""

import logging
from dataclasses import dataclass

from meal_storefront.domain.menu import (
    WEEKDAY_BREAKFAST,
    WEEKDAY_LUNCH,
    WEEKEND_LUNCH,
    MenuItemDraft,
)
from meal_storefront.services.menu import MenuRepository

logger = logging.getLogger(__name__)

STARTER_MENU: tuple[MenuItemDraft, ...] = (
    MenuItemDraft(
        name="Akamu & Akara",
        description="Smooth pap and flaky akara",
        price=600,
        meal_type=WEEKDAY_BREAKFAST,
    ),
    MenuItemDraft(
        name="Moi Moi Deluxe",
        description="Steamed bean pudding",
        price=900,
        meal_type=WEEKDAY_BREAKFAST,
    ),
    MenuItemDraft(
        name="Jollof Rice & Chicken",
        description="Signature jollof with chicken",
        price=1500,
        meal_type=WEEKDAY_LUNCH,
    ),
    MenuItemDraft(
        name="Gizdodo Bowl",
        description="Gizzard and plantain",
        price=1300,
        meal_type=WEEKDAY_LUNCH,
    ),
    MenuItemDraft(
        name="Weekend Egusi",
        description="Rich egusi for the weekend",
        price=1800,
        meal_type=WEEKEND_LUNCH,
    ),
)


@dataclass
class SeedLoader:
    """Populates the menu on first start."""

    repository: MenuRepository
    drafts: tuple[MenuItemDraft, ...] = STARTER_MENU

    def load(self) -> int:
        """Insert the starter menu if the catalog is empty.

        Returns the number of items inserted, zero when the menu already
        had rows.
        """
        if self.repository.count_items() > 0:
            return 0
        self.repository.create_items(list(self.drafts))
        logger.info("Seeded %d starter menu items", len(self.drafts))
        return len(self.drafts)
