# src/simonsays/commands/listing.py
from __future__ import annotations

from pathlib import Path

import typer

from simonsays.commands.common import resolve_root
from simonsays.core.errors import SimonSaysError, to_exit
from simonsays.modules.listing.schemas import ListRequest
from simonsays.modules.listing.service import ListingService, parse_sort_key


class ListCommand:
    name = "list"
    description = "List files with various sorting options"

    def execute(
        self,
        root: Path | None = typer.Argument(None, help="Directory to list."),
        sort: str = typer.Option("name", "--sort", help="Sort by (name, size, time)"),
        recursive: bool = typer.Option(
            False, "--recursive", help="List files recursively"
        ),
    ) -> None:
        try:
            root = resolve_root(root)
            req = ListRequest(root=root, sort=parse_sort_key(sort), recursive=recursive)
            # Build the whole report first: an error mid-walk prints nothing.
            lines = ListingService(root).report(req)
        except SimonSaysError as exc:
            raise to_exit(exc) from exc
        for line in lines:
            typer.echo(line)
