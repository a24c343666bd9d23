"""Pydantic request and response models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from meal_storefront.domain.menu import MenuItemDraft


class MenuItemPayload(BaseModel):
    """Menu item fields accepted by the admin endpoints."""

    model_config = ConfigDict(extra="ignore")

    name: str
    description: str = ""
    price: float = 0.0
    meal_type: str = ""
    image_url: str = ""

    def to_draft(self) -> MenuItemDraft:
        return MenuItemDraft(
            name=self.name,
            description=self.description,
            price=self.price,
            meal_type=self.meal_type,
            image_url=self.image_url,
        )


class MenuItemResponse(BaseModel):
    """A menu item as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    price: float
    meal_type: str
    image_url: str
    created_at: datetime


class MenuListResponse(BaseModel):
    """A list of menu items."""

    items: list[MenuItemResponse]


class SubscribePayload(BaseModel):
    """Sign-up form for a meal subscription."""

    name: str = Field(min_length=1)
    email: EmailStr
    plan: str = Field(min_length=1)


class SubscriberResponse(BaseModel):
    """A subscriber as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    plan: str
    start_date: datetime
    end_date: datetime
    active: bool
    created_at: datetime


class SubscribeResponse(BaseModel):
    """Result of a successful sign-up."""

    ok: bool = True
    subscriber: SubscriberResponse


class TopItemResponse(BaseModel):
    """A popular item with its order count."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    count: int


class AnalyticsResponse(BaseModel):
    """Aggregate stats; recent subscribers only appear for admins."""

    model_config = ConfigDict(from_attributes=True)

    total_subscribers: int
    active_subscribers: int
    top_items: list[TopItemResponse]
    recent_subscribers: list[SubscriberResponse] | None = None


class OkResponse(BaseModel):
    ok: bool = True


class UploadResponse(BaseModel):
    url: str
