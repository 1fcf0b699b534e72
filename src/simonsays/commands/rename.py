# src/simonsays/commands/rename.py
from __future__ import annotations

from pathlib import Path

import typer

from simonsays.commands.common import resolve_root_and_pattern
from simonsays.core.errors import SimonSaysError, to_exit
from simonsays.modules.rename.schemas import RenameRequest
from simonsays.modules.rename.service import RenameService


class RenameRunner:
    def __init__(self, root: Path, pattern: str, dry_run: bool, start: int) -> None:
        self.req = RenameRequest(
            root=root, template=pattern, dry_run=dry_run, start=start
        )
        self.service = RenameService(root)

    def run(self) -> None:
        if self.req.dry_run:
            for item in self.service.plan(self.req):
                typer.echo(f"Would rename: {item.src} -> {item.dst}")
            return

        for item in self.service.iter_apply(self.req):
            typer.echo(f"Renamed: {item.src} -> {item.dst}")


class BulkRenameCommand:
    name = "bulkrename"
    description = "Bulk rename files based on a pattern"

    def execute(
        self,
        root: Path | None = typer.Argument(None, help="Directory holding the files."),
        pattern: str | None = typer.Argument(
            None, help="New name, e.g. 'img-{index}{ext}' or '{name}_{index}'."
        ),
        dry_run: bool = typer.Option(
            False,
            "--dry-run",
            help="Show what would be renamed without actually renaming",
        ),
        start: int = typer.Option(
            1, "--start", help="Starting index for {index} pattern"
        ),
    ) -> None:
        try:
            root, pattern = resolve_root_and_pattern(root, pattern)
            RenameRunner(root, pattern, dry_run, start).run()
        except SimonSaysError as exc:
            raise to_exit(exc) from exc
