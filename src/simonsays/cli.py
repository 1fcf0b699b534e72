# src/simonsays/cli.py
from __future__ import annotations

import typer

from simonsays.commands.listing import ListCommand
from simonsays.commands.rename import BulkRenameCommand
from simonsays.commands.sort import SORT_COMMANDS
from simonsays.core.config import get_settings
from simonsays.core.logging import configure_logging
from simonsays.core.registry import CommandRegistry
from simonsays.version import get_version

HELP = "A swiss-knife tool for file and directory manipulation"


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()
    for cmd in SORT_COMMANDS:
        registry.register(cmd)
    registry.register(BulkRenameCommand())
    registry.register(ListCommand())
    return registry


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"simonsays {get_version()}")
        raise typer.Exit()


def build_app(registry: CommandRegistry) -> typer.Typer:
    app = typer.Typer(help=HELP, no_args_is_help=True, add_completion=False)

    @app.callback()
    def main(
        log_level: str | None = typer.Option(
            None, "--log-level", help="Logging level (default: SIMONSAYS_LOG_LEVEL)"
        ),
        log_json: bool = typer.Option(False, "--log-json", help="JSON log lines"),
        version: bool = typer.Option(
            False,
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ) -> None:
        settings = get_settings()
        configure_logging(
            level=log_level or settings.LOG_LEVEL,
            json=log_json or settings.LOG_JSON,
        )

    for cmd in registry.all():
        app.command(name=cmd.name, help=cmd.description)(cmd.execute)

    return app


registry = build_registry()
app = build_app(registry)


if __name__ == "__main__":
    app()
