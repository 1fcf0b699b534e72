"""
Pytest fixtures for simonsays tests.

Provides temporary directory trees with controlled sizes and modification
times, plus a CLI runner.
"""

import os
from datetime import datetime
from pathlib import Path

import pytest
from typer.testing import CliRunner

from simonsays.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; drop the cache around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def make_file():
    """
    Factory creating a file with an exact size and, optionally, a fixed
    modification time. Parent directories are created as needed.
    """

    def _make(path: Path, size: int = 0, mtime: datetime | None = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            if size:
                f.truncate(size)
        if mtime is not None:
            ts = mtime.timestamp()
            os.utime(path, (ts, ts))
        return path

    return _make


@pytest.fixture
def mixed_tree(tmp_path: Path, make_file) -> Path:
    """
    root/
      notes.txt        (10 bytes)
      photo.jpg        (5 bytes)
      README           (no extension)
      sub/
        report.pdf     (20 bytes)
    """
    make_file(tmp_path / "notes.txt", size=10)
    make_file(tmp_path / "photo.jpg", size=5)
    make_file(tmp_path / "README", size=1)
    make_file(tmp_path / "sub" / "report.pdf", size=20)
    return tmp_path


@pytest.fixture
def snapshot():
    """Relative paths of every file and directory under a root."""

    def _snapshot(root: Path) -> set[str]:
        return {str(p.relative_to(root)) for p in root.rglob("*")}

    return _snapshot
