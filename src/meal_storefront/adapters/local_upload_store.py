"""Local-disk store for uploaded images."""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from meal_storefront.services.uploads import UploadStore


@dataclass
class LocalUploadStore(UploadStore):
    """Writes uploads into a flat directory served at ``/uploads``."""

    root: Path

    def __post_init__(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def write(self, name: str, content: BinaryIO) -> None:
        """Copy ``content`` to ``root/name``."""
        with (self.root / name).open("wb") as target:
            shutil.copyfileobj(content, target)
