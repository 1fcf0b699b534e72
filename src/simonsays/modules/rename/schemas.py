# src/simonsays/modules/rename/schemas.py
from __future__ import annotations

from pydantic import BaseModel, DirectoryPath, Field, field_validator

from simonsays.core.files import split_ext

INDEX_TOKEN = "{index}"
NAME_TOKEN = "{name}"
EXT_TOKEN = "{ext}"


class RenameTemplate(BaseModel):
    pattern: str = Field(
        ...,
        min_length=1,
        description=(
            "New file name. {index}, {name} and {ext} are replaced in that order "
            "by plain text substitution; if the result has no '.', the original "
            "extension is appended."
        ),
        examples=["img-{index}{ext}", "{name}_{index}"],
    )

    def resolve(self, filename: str, index: int) -> str:
        base, ext = split_ext(filename)
        new_name = self.pattern.replace(INDEX_TOKEN, str(index))
        new_name = new_name.replace(NAME_TOKEN, base)
        new_name = new_name.replace(EXT_TOKEN, ext)
        if "." not in new_name:
            new_name += ext
        return new_name


class RenameRequest(BaseModel):
    root: DirectoryPath = Field(
        ...,
        description="Directory whose immediate files are renamed (no recursion).",
        examples=["/data/photos"],
    )
    template: RenameTemplate
    dry_run: bool = Field(
        False,
        description="If true, only report what would be renamed.",
    )
    start: int = Field(
        1,
        description="Value substituted for {index} on the first file.",
        examples=[1],
    )

    @field_validator("template", mode="before")
    @classmethod
    def _coerce_pattern(cls, v: object) -> object:
        if isinstance(v, str):
            return RenameTemplate(pattern=v)
        return v


class RenamedItem(BaseModel):
    src: str = Field(..., description="Original file path.")
    dst: str = Field(..., description="New file path.")
