"""Subscription sign-up and listing."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from meal_storefront.domain.subscribers import Subscriber

logger = logging.getLogger(__name__)

SUBSCRIPTION_PERIOD = timedelta(days=30)


class SubscriberRepository(Protocol):
    """Persistence interface for subscribers."""

    def create_subscriber(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        plan: str,
        start_date: datetime,
        end_date: datetime,
        active: bool,
    ) -> Subscriber:
        """Insert a subscriber and return it."""

    def list_subscribers(self, limit: int | None = None) -> list[Subscriber]:
        """Return subscribers newest first, up to ``limit`` when given."""

    def count_subscribers(self, active_only: bool = False) -> int:
        """Return the number of subscribers."""


@dataclass
class SubscriptionService:
    """Application service for subscriber lifecycle actions."""

    repository: SubscriberRepository

    def subscribe(
        self, name: str, email: str, plan: str, now: datetime | None = None
    ) -> Subscriber:
        """Start a 30-day active subscription beginning now (UTC)."""
        start_date = now or datetime.now(tz=UTC)
        subscriber = self.repository.create_subscriber(
            name=name,
            email=email,
            plan=plan,
            start_date=start_date,
            end_date=start_date + SUBSCRIPTION_PERIOD,
            active=True,
        )
        logger.info("New subscriber %s on plan %s", subscriber.id, plan)
        return subscriber

    def list_subscribers(self) -> list[Subscriber]:
        """Return every subscriber, newest first."""
        return self.repository.list_subscribers()
