"""Search result models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchHit(BaseModel):
    """A single matching line."""

    line_number: int = Field(..., ge=1)
    line: str
    highlighted: str
    level: str | None = None
    topic: str | None = None
