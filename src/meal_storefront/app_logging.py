"""Logging configuration helpers."""

import logging

_LOGGER_NAME = "meal_storefront"


def configure_logging(level: int = logging.INFO) -> None:
    """Attach one stream handler to the package logger, once."""
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
