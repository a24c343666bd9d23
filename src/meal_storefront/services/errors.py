"""Errors raised by storefront services and their repositories."""


class MenuItemNotFoundError(LookupError):
    """Raised when a menu item id has no matching row."""

    def __init__(self, item_id: int | str) -> None:
        super().__init__(f"menu item {item_id} not found")
        self.item_id = item_id


class StoreError(RuntimeError):
    """Raised when the persistent store rejects a write."""
