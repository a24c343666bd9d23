"""SQLAlchemy repository for subscribers."""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import func, select

from meal_storefront.adapters.database import Database, SubscriberRow, as_utc
from meal_storefront.domain.subscribers import Subscriber
from meal_storefront.services.subscriptions import SubscriberRepository


@dataclass
class SqlAlchemySubscriberRepository(SubscriberRepository):
    """SQLAlchemy implementation for subscriber persistence."""

    database: Database

    def create_subscriber(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        plan: str,
        start_date: datetime,
        end_date: datetime,
        active: bool,
    ) -> Subscriber:
        """Insert a subscriber row and return it."""
        with self.database.transaction("save subscriber") as session:
            row = SubscriberRow(
                name=name,
                email=email,
                plan=plan,
                start_date=start_date,
                end_date=end_date,
                active=active,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_subscriber(row)

    def list_subscribers(self, limit: int | None = None) -> list[Subscriber]:
        """Return subscribers newest first."""
        stmt = select(SubscriberRow).order_by(
            SubscriberRow.created_at.desc(), SubscriberRow.id.desc()
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        with self.database.Session() as session:
            return [_to_subscriber(row) for row in session.execute(stmt).scalars()]

    def count_subscribers(self, active_only: bool = False) -> int:
        """Return the number of subscribers."""
        stmt = select(func.count()).select_from(SubscriberRow)
        if active_only:
            stmt = stmt.where(SubscriberRow.active.is_(True))
        with self.database.Session() as session:
            return session.scalar(stmt) or 0


def _to_subscriber(row: SubscriberRow) -> Subscriber:
    return Subscriber(
        id=row.id,
        name=row.name,
        email=row.email,
        plan=row.plan,
        start_date=as_utc(row.start_date),
        end_date=as_utc(row.end_date),
        active=bool(row.active),
        created_at=as_utc(row.created_at),
    )
