# src/simonsays/modules/rename/service.py
from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from simonsays.core.errors import FileOperationError
from simonsays.core.files import list_files
from simonsays.core.logging import get_logger

from .schemas import RenamedItem, RenameRequest

log = get_logger(__name__)


class RenameService:
    """Template-driven bulk rename of the files directly inside one directory."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def plan(self, req: RenameRequest) -> list[RenamedItem]:
        # Destinations are not checked against each other or existing files.
        items: list[RenamedItem] = []
        for i, src in enumerate(list_files(self.root)):
            new_name = req.template.resolve(src.name, req.start + i)
            items.append(RenamedItem(src=str(src), dst=str(self.root / new_name)))
        return items

    def iter_apply(self, req: RenameRequest) -> Iterator[RenamedItem]:
        items = self.plan(req)
        log.debug("renaming %d file(s) in %s", len(items), self.root)
        for done, item in enumerate(items):
            try:
                self._rename(Path(item.src), Path(item.dst))
            except FileOperationError as e:
                log.debug("stopping after %d rename(s): %s", done, e)
                raise
            yield item
        log.info("renamed %d file(s) in %s", len(items), self.root)

    def apply(self, req: RenameRequest) -> list[RenamedItem]:
        return list(self.iter_apply(req))

    @staticmethod
    def _rename(src: Path, dst: Path) -> None:
        try:
            src.replace(dst)
        except OSError as e:
            raise FileOperationError("rename", src, e, target=dst) from e
