"""Command-line entrypoint that serves the API with uvicorn."""

import logging

import uvicorn

from meal_storefront.app_logging import configure_logging
from meal_storefront.config import Settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the HTTP server on the configured host and port."""
    settings = Settings()
    configure_logging()
    logger.info("starting backend on port %s", settings.port)
    uvicorn.run(
        "meal_storefront.api.asgi:app",
        host=settings.host,
        port=settings.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
