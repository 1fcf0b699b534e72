# src/simonsays/commands/sort.py
from __future__ import annotations

from pathlib import Path

import typer

from simonsays.commands.common import resolve_root
from simonsays.core.errors import SimonSaysError, to_exit
from simonsays.modules.sort.schemas import SortRequest, SortStrategy
from simonsays.modules.sort.service import SortService


class SortRunner:
    def __init__(self, root: Path, strategy: SortStrategy) -> None:
        self.root = root
        self.strategy = strategy
        self.service = SortService(root)

    def run(self) -> None:
        req = SortRequest(root=self.root, strategy=self.strategy)
        # Echo as we go so completed moves are reported even if a later one fails.
        for item in self.service.iter_apply(req):
            typer.echo(f"Moved {item.src} to {item.dst}")


class SortCommand:
    def __init__(self, name: str, description: str, strategy: SortStrategy) -> None:
        self.name = name
        self.description = description
        self.strategy = strategy

    def execute(
        self,
        root: Path | None = typer.Argument(
            None, help="Directory to sort (walked recursively)."
        ),
    ) -> None:
        try:
            SortRunner(resolve_root(root), self.strategy).run()
        except SimonSaysError as exc:
            raise to_exit(exc) from exc


SORT_COMMANDS = (
    SortCommand(
        "sortbydate",
        "Sort files into directories based on their modification date",
        SortStrategy.by_date,
    ),
    SortCommand(
        "sortbytype",
        "Sort files into directories based on their file type/extension",
        SortStrategy.by_type,
    ),
    SortCommand(
        "sortbysize",
        "Sort files into directories based on their size (small, medium, large)",
        SortStrategy.by_size,
    ),
)
