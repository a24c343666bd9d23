"""SQLAlchemy repository for order statistics."""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import func, select

from meal_storefront.adapters.database import Database, OrderRow, as_utc
from meal_storefront.domain.orders import ItemOrderCount, OrderRecord
from meal_storefront.services.recommendations import OrderRepository


@dataclass
class SqlAlchemyOrderRepository(OrderRepository):
    """SQLAlchemy implementation for order aggregates."""

    database: Database

    def top_items(self, limit: int) -> list[ItemOrderCount]:
        """Return per-item order counts, most ordered first."""
        count = func.count(OrderRow.id).label("cnt")
        stmt = (
            select(OrderRow.menu_item_id, count)
            .group_by(OrderRow.menu_item_id)
            .order_by(count.desc(), OrderRow.menu_item_id.asc())
            .limit(limit)
        )
        with self.database.Session() as session:
            return [
                ItemOrderCount(menu_item_id=menu_item_id, count=cnt)
                for menu_item_id, cnt in session.execute(stmt)
            ]

    def create_order(
        self, subscriber_id: int, menu_item_id: int, date: datetime
    ) -> OrderRecord:
        """Insert an order row and return it."""
        with self.database.transaction("record order") as session:
            row = OrderRow(
                subscriber_id=subscriber_id, menu_item_id=menu_item_id, date=date
            )
            session.add(row)
            session.flush()
            return OrderRecord(
                id=row.id,
                subscriber_id=row.subscriber_id,
                menu_item_id=row.menu_item_id,
                date=as_utc(row.date),
            )
