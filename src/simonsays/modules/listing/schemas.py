# src/simonsays/modules/listing/schemas.py
from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, DirectoryPath, Field


class SortKey(str, Enum):
    name = "name"
    size = "size"
    time = "time"


class ListRequest(BaseModel):
    root: DirectoryPath = Field(..., examples=["/data/inbox"])
    sort: SortKey = Field(SortKey.name, description="Ascending sort key.")
    recursive: bool = Field(
        False, description="Walk sub-directories instead of a flat read."
    )


class ListedItem(BaseModel):
    name: str
    size: int = Field(..., ge=0, description="Size in bytes.")
    modified: datetime = Field(..., description="Timezone-aware modification time.")

    def line(self) -> str:
        stamp = self.modified.isoformat(timespec="seconds")
        if stamp.endswith("+00:00"):
            stamp = stamp[:-6] + "Z"
        return f"- {self.name} (Size: {self.size} bytes, Modified: {stamp})"
