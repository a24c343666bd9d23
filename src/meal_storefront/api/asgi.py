"""ASGI entrypoint for the storefront API."""

from meal_storefront.api.app import create_app
from meal_storefront.containers import build_container

app = create_app(build_container())
