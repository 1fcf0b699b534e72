# src/simonsays/core/registry.py
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Command(Protocol):
    name: str
    description: str

    def execute(self, *args: Any, **kwargs: Any) -> None: ...


class CommandRegistry:
    """Name -> command lookup. Re-registering a name replaces the old handler."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        self._commands[command.name] = command

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    def all(self) -> list[Command]:
        # No ordering guarantee; callers must not rely on registration order.
        return list(self._commands.values())

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)
