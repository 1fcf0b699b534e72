# src/simonsays/modules/sort/strategies/by_size.py
from __future__ import annotations

from simonsays.core.files import FileEntry

from .base import SortStrategyBase

SMALL_LIMIT = 1024 * 1024  # 1 MiB, exclusive
MEDIUM_LIMIT = 10 * 1024 * 1024  # 10 MiB, exclusive


def size_key(size: int) -> str:
    if size < SMALL_LIMIT:
        return "small"
    if size < MEDIUM_LIMIT:
        return "medium"
    return "large"


class SortBySizeStrategy(SortStrategyBase):
    """Sort files into <parent>/{small,medium,large}/filename."""

    def category(self, entry: FileEntry) -> str:
        return size_key(entry.size)
