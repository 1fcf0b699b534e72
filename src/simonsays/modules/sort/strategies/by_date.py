# src/simonsays/modules/sort/strategies/by_date.py
from __future__ import annotations

from datetime import datetime

from simonsays.core.files import FileEntry

from .base import SortStrategyBase

DATE_FOLDER_FORMAT = "%d%m%Y"


def date_key(mtime: datetime) -> str:
    return mtime.strftime(DATE_FOLDER_FORMAT)


class SortByDateStrategy(SortStrategyBase):
    """Sort files into <parent>/DDMMYYYY/filename by local modification date."""

    def category(self, entry: FileEntry) -> str:
        return date_key(entry.mtime)
