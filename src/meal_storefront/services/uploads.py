"""Image uploads for menu items."""

import logging
import os
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import BinaryIO, Protocol

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads/"


class UploadStore(Protocol):
    """Flat file store for uploaded content."""

    def write(self, name: str, content: BinaryIO) -> None:
        """Persist ``content`` under ``name``."""


@dataclass
class UploadService:
    """Names uploaded files and hands them to the store."""

    store: UploadStore
    clock_ns: Callable[[], int] = field(default=time.time_ns)

    def save(self, original_filename: str | None, content: BinaryIO) -> str:
        """Store an upload and return its public relative URL.

        The stored name is a nanosecond timestamp followed by the original
        file's extension.
        """
        _, extension = os.path.splitext(original_filename or "")
        name = f"{self.clock_ns()}{extension}"
        self.store.write(name, content)
        logger.info("Stored upload %s", name)
        return UPLOADS_URL_PREFIX + name
