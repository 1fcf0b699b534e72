# src/simonsays/core/files.py
from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from simonsays.core.errors import BadRequest, FileOperationError, NotFound


def split_ext(name: str) -> tuple[str, str]:
    """
    Split a file name into (base, ext) where ext starts at the LAST dot.

    Unlike Path.suffix a dot-file keeps its whole name as the extension:
    ".bashrc" -> ("", ".bashrc"), "a.tar.gz" -> ("a.tar", ".gz").
    """
    i = name.rfind(".")
    if i == -1:
        return name, ""
    return name[:i], name[i:]


@dataclass(frozen=True)
class FileEntry:
    path: Path
    name: str
    size: int
    mtime: datetime

    @classmethod
    def from_path(cls, path: Path) -> FileEntry:
        # lstat: a symlink is described by itself, dangling or not
        try:
            st = path.lstat()
        except OSError as e:
            raise FileOperationError("get file info for", path, e) from e
        return cls(
            path=path,
            name=path.name,
            size=st.st_size,
            mtime=datetime.fromtimestamp(st.st_mtime),
        )

    @property
    def base(self) -> str:
        return split_ext(self.name)[0]

    @property
    def ext(self) -> str:
        return split_ext(self.name)[1]


def require_dir(path: Path | None) -> Path:
    """Validate a user-supplied directory argument."""
    if path is None:
        raise BadRequest("please provide a directory path")
    try:
        st = path.stat()
    except OSError as e:
        raise NotFound(f"error accessing path {path}: {e}") from e
    if not stat.S_ISDIR(st.st_mode):
        raise BadRequest(f"{path} is not a directory")
    return path


def _scan(path: Path) -> list[os.DirEntry]:
    try:
        with os.scandir(path) as it:
            return sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise FileOperationError("read directory", path, e) from e


def _walk(path: Path) -> Iterator[Path]:
    for entry in _scan(path):
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(Path(entry.path))
        else:
            yield Path(entry.path)


def iter_files(root: Path, recursive: bool = True) -> Iterator[Path]:
    """
    Yield every non-directory entry under root.

    Files and sub-directories of one directory share a single lexical order,
    so "a/x.txt" comes before "b.txt". Symlinks are yielded as files and never
    followed. Each directory is listed once, when the walk reaches it, so
    folders the caller creates in an already-listed directory are not visited.
    """
    if not recursive:
        yield from list_files(root)
        return
    yield from _walk(Path(root))


def list_files(root: Path) -> list[Path]:
    """Immediate, non-directory children of root in lexical order."""
    return [
        Path(e.path) for e in _scan(Path(root)) if not e.is_dir(follow_symlinks=False)
    ]
