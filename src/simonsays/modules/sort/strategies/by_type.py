# src/simonsays/modules/sort/strategies/by_type.py
from __future__ import annotations

from simonsays.core.files import FileEntry, split_ext

from .base import SortStrategyBase

NO_EXTENSION_FOLDER = "other"


def type_key(name: str) -> str:
    # Case is kept: "a.TXT" and "a.txt" go to different folders.
    ext = split_ext(name)[1].removeprefix(".")
    return ext or NO_EXTENSION_FOLDER


class SortByTypeStrategy(SortStrategyBase):
    """Sort files into <parent>/<extension>/filename."""

    def category(self, entry: FileEntry) -> str:
        return type_key(entry.name)
