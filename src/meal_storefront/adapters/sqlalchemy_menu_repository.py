"""SQLAlchemy repository for menu items."""

from dataclasses import dataclass

from sqlalchemy import delete, func, select, update

from meal_storefront.adapters.database import Database, MenuItemRow, as_utc
from meal_storefront.domain.menu import MenuItem, MenuItemDraft
from meal_storefront.services.menu import MenuRepository


@dataclass
class SqlAlchemyMenuRepository(MenuRepository):
    """SQLAlchemy implementation for menu persistence."""

    database: Database

    def list_items(self, meal_type: str | None = None) -> list[MenuItem]:
        """Return items newest first, optionally filtered by meal type."""
        stmt = select(MenuItemRow).order_by(
            MenuItemRow.created_at.desc(), MenuItemRow.id.desc()
        )
        if meal_type is not None:
            stmt = stmt.where(MenuItemRow.meal_type == meal_type)
        with self.database.Session() as session:
            return [_to_menu_item(row) for row in session.execute(stmt).scalars()]

    def get_item(self, item_id: int) -> MenuItem | None:
        """Return the item with the given id, if present."""
        with self.database.Session() as session:
            row = session.get(MenuItemRow, item_id)
            return _to_menu_item(row) if row else None

    def get_items(self, item_ids: list[int]) -> list[MenuItem]:
        """Return the items whose ids are in the list."""
        if not item_ids:
            return []
        stmt = select(MenuItemRow).where(MenuItemRow.id.in_(item_ids))
        with self.database.Session() as session:
            return [_to_menu_item(row) for row in session.execute(stmt).scalars()]

    def list_cheapest(self, limit: int) -> list[MenuItem]:
        """Return the cheapest items, ascending by price."""
        stmt = (
            select(MenuItemRow)
            .order_by(MenuItemRow.price.asc(), MenuItemRow.id.asc())
            .limit(limit)
        )
        with self.database.Session() as session:
            return [_to_menu_item(row) for row in session.execute(stmt).scalars()]

    def create_item(self, draft: MenuItemDraft) -> MenuItem:
        """Insert a new item and return it."""
        with self.database.transaction("create menu item") as session:
            row = _to_row(draft)
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_menu_item(row)

    def create_items(self, drafts: list[MenuItemDraft]) -> list[MenuItem]:
        """Insert all drafts in one transaction; any failure rolls back all."""
        with self.database.transaction("create menu items") as session:
            rows = [_to_row(draft) for draft in drafts]
            session.add_all(rows)
            session.flush()
            for row in rows:
                session.refresh(row)
            return [_to_menu_item(row) for row in rows]

    def update_item(self, item_id: int, draft: MenuItemDraft) -> MenuItem | None:
        """Overwrite an item with a single conditional UPDATE.

        The image URL column is left untouched when the draft's is empty.
        """
        values: dict[str, object] = {
            "name": draft.name,
            "description": draft.description,
            "price": draft.price,
            "meal_type": draft.meal_type,
        }
        if draft.image_url:
            values["image_url"] = draft.image_url
        stmt = (
            update(MenuItemRow)
            .where(MenuItemRow.id == item_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        with self.database.transaction("update menu item") as session:
            result = session.execute(stmt)
            if result.rowcount == 0:
                return None
            row = session.get(MenuItemRow, item_id)
            return _to_menu_item(row) if row else None

    def delete_item(self, item_id: int) -> None:
        """Delete an item; unknown ids are ignored."""
        with self.database.transaction("delete menu item") as session:
            session.execute(delete(MenuItemRow).where(MenuItemRow.id == item_id))

    def count_items(self) -> int:
        """Return the number of menu items."""
        with self.database.Session() as session:
            return session.scalar(select(func.count()).select_from(MenuItemRow)) or 0


def _to_menu_item(row: MenuItemRow) -> MenuItem:
    return MenuItem(
        id=row.id,
        name=row.name,
        description=row.description or "",
        price=float(row.price or 0.0),
        meal_type=row.meal_type or "",
        image_url=row.image_url or "",
        created_at=as_utc(row.created_at),
    )


def _to_row(draft: MenuItemDraft) -> MenuItemRow:
    return MenuItemRow(
        name=draft.name,
        description=draft.description,
        price=draft.price,
        meal_type=draft.meal_type,
        image_url=draft.image_url,
    )
