"""Domain models for subscriptions."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Subscriber:
    """A customer signed up to a meal plan."""

    id: int
    name: str
    email: str
    plan: str
    start_date: datetime
    end_date: datetime
    active: bool
    created_at: datetime
