# src/simonsays/modules/listing/service.py
from __future__ import annotations

from pathlib import Path

from simonsays.core.errors import BadRequest
from simonsays.core.files import FileEntry, iter_files
from simonsays.core.logging import get_logger

from .schemas import ListedItem, ListRequest, SortKey

log = get_logger(__name__)

HEADER = "Files:"

_SORT_KEYS = {
    SortKey.name: lambda e: e.name,
    SortKey.size: lambda e: e.size,
    SortKey.time: lambda e: e.mtime,
}


def parse_sort_key(value: str) -> SortKey:
    try:
        return SortKey(value)
    except ValueError:
        raise BadRequest(f"unknown sort option: {value}") from None


class ListingService:
    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def collect(self, recursive: bool) -> list[FileEntry]:
        return [
            FileEntry.from_path(p) for p in iter_files(self.root, recursive=recursive)
        ]

    def run(self, req: ListRequest) -> list[ListedItem]:
        entries = sorted(self.collect(req.recursive), key=_SORT_KEYS[req.sort])
        log.debug("listed %d file(s) under %s by %s", len(entries), self.root, req.sort.value)
        return [
            ListedItem(name=e.name, size=e.size, modified=e.mtime.astimezone())
            for e in entries
        ]

    def report(self, req: ListRequest) -> list[str]:
        return [HEADER, *(item.line() for item in self.run(req))]
