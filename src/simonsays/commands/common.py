# src/simonsays/commands/common.py
from __future__ import annotations

from pathlib import Path

from simonsays.core.errors import BadRequest
from simonsays.core.files import require_dir


def resolve_root(maybe_root: Path | None) -> Path:
    """Standardize the <dir> positional across commands."""
    return require_dir(maybe_root)


def resolve_root_and_pattern(
    maybe_root: Path | None, pattern: str | None
) -> tuple[Path, str]:
    if maybe_root is None or not pattern:
        raise BadRequest("please provide a directory path and rename pattern")
    return require_dir(maybe_root), pattern
