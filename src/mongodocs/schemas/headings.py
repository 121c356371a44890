"""Heading and table-of-contents models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Heading(BaseModel):
    """A heading line found in a document."""

    level: int = Field(..., ge=1, le=4)
    text: str
    id: str = Field(..., min_length=1)
    line: int = Field(default=0, ge=0)


class TocEntry(BaseModel):
    """One row of the navigation panel."""

    id: str
    text: str
    level: int = Field(..., ge=1, le=4)
    indent: int = Field(default=0, ge=0)
    active: bool = False
