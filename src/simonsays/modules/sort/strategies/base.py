# src/simonsays/modules/sort/strategies/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from simonsays.core.files import FileEntry, iter_files


class SortStrategyBase(ABC):
    """DRY base for sort strategies: walk, categorize, compute destination."""

    def iter_files(self, root: Path) -> Iterable[Path]:
        return iter_files(root, recursive=True)

    def target(self, src: Path) -> tuple[str, Path]:
        """Return (category, destination) for one file; the file stays in its parent."""
        key = self.category(FileEntry.from_path(src))
        return key, src.parent / key / src.name

    @abstractmethod
    def category(self, entry: FileEntry) -> str:
        """Category folder name for the entry. Must be a pure function of its metadata."""
        raise NotImplementedError
