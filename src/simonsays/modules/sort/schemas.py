# src/simonsays/modules/sort/schemas.py
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, DirectoryPath, Field


class SortStrategy(str, Enum):
    by_date = "by_date"
    by_type = "by_type"
    by_size = "by_size"


class SortRequest(BaseModel):
    root: DirectoryPath = Field(
        ...,
        description="Directory to walk recursively. Files are sorted in place.",
        examples=["/data/inbox"],
    )
    strategy: SortStrategy = Field(
        ...,
        description="Which category key decides the destination sub-folder.",
        examples=[SortStrategy.by_type],
    )


class MoveItem(BaseModel):
    src: str = Field(..., description="Original file path.")
    dst: str = Field(..., description="Path inside the category folder.")
    category: str = Field(..., description="Category folder name.", examples=["txt"])
