# src/simonsays/modules/sort/service.py
from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from simonsays.core.config import get_settings
from simonsays.core.errors import FileOperationError
from simonsays.core.logging import get_logger

from .schemas import MoveItem, SortRequest, SortStrategy
from .strategies.base import SortStrategyBase
from .strategies.by_date import SortByDateStrategy
from .strategies.by_size import SortBySizeStrategy
from .strategies.by_type import SortByTypeStrategy

log = get_logger(__name__)

_STRATEGIES: dict[SortStrategy, type[SortStrategyBase]] = {
    SortStrategy.by_date: SortByDateStrategy,
    SortStrategy.by_type: SortByTypeStrategy,
    SortStrategy.by_size: SortBySizeStrategy,
}


class SortService:
    """
    Traversal-and-move engine shared by the sortby* commands.

    Walks the request root, asks the strategy for a category per file, creates
    the category folder beside the file and moves the file into it. The first
    failure stops the walk; moves that already happened are left in place.
    """

    def __init__(self, root: Path, dir_mode: int | None = None) -> None:
        self.root = Path(root)
        self.dir_mode = get_settings().DIR_MODE if dir_mode is None else dir_mode

    @staticmethod
    def _select(strategy: SortStrategy) -> SortStrategyBase:
        return _STRATEGIES[strategy]()

    def iter_apply(self, req: SortRequest) -> Iterator[MoveItem]:
        strat = self._select(req.strategy)
        log.debug("sorting %s with %s", self.root, req.strategy.value)
        moved = 0
        for src in strat.iter_files(self.root):
            try:
                key, dst = strat.target(src)
                self._ensure_dir(dst.parent)
                self._move(src, dst)
            except FileOperationError as e:
                log.debug("stopping after %d move(s): %s", moved, e)
                raise
            moved += 1
            yield MoveItem(src=str(src), dst=str(dst), category=key)
        log.info("sorted %d file(s) under %s", moved, self.root)

    def apply(self, req: SortRequest) -> list[MoveItem]:
        return list(self.iter_apply(req))

    # ---- filesystem ops ---------------------------------------------------------

    def _ensure_dir(self, path: Path) -> None:
        try:
            path.mkdir(mode=self.dir_mode, parents=True, exist_ok=True)
        except OSError as e:
            raise FileOperationError("create directory", path, e) from e

    @staticmethod
    def _move(src: Path, dst: Path) -> None:
        # replace(): an existing file at dst is overwritten on every platform
        try:
            src.replace(dst)
        except OSError as e:
            raise FileOperationError("move file", src, e, target=dst) from e
