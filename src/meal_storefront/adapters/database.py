"""SQLAlchemy engine, session factory and table definitions."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    Numeric,
    String,
    Text,
    create_engine,
)
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from meal_storefront.services.errors import StoreError

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


class MenuItemRow(Base):
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
    meal_type = Column(String, nullable=False, default="", index=True)
    image_url = Column(String, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class SubscriberRow(Base):
    __tablename__ = "subscribers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    plan = Column(String, nullable=False)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class OrderRow(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    subscriber_id = Column(Integer, nullable=False, index=True)
    menu_item_id = Column(Integer, nullable=False, index=True)
    date = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


def _is_in_memory(database_url: str) -> bool:
    return database_url.split("?")[0].rstrip("/").endswith(
        (":memory:", "sqlite:", "sqlite+pysqlite:")
    )


class Database:
    """
    Owns the engine and session factory. Accepts any SQLAlchemy URL; SQLite
    files and in-memory databases are the expected targets.
    """

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("DATABASE_URL is required")
        engine_kwargs: dict[str, object] = {}
        if database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if _is_in_memory(database_url):
                # one shared connection, otherwise each session sees an empty db
                engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(database_url, future=True, **engine_kwargs)
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )

    def create_schema(self) -> None:
        """Create any missing tables."""
        Base.metadata.create_all(self.engine)

    @contextmanager
    def transaction(self, action: str) -> Iterator[Session]:
        """Yield a session committed on exit; store failures become ``StoreError``."""
        try:
            with self.Session.begin() as session:
                yield session
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to {action}") from exc

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps read back from SQLite."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
