"""Sidebar catalogue models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TopicEntry(BaseModel):
    """A link in the sidebar."""

    id: str
    title: str
    slug: str

    @property
    def level(self) -> str:
        return self.slug.split("/", 1)[0]

    @property
    def topic(self) -> str:
        return self.slug.split("/", 1)[1]


class TopicGroup(BaseModel):
    """A collapsible level section of the sidebar."""

    id: str
    title: str
    children: list[TopicEntry] = Field(default_factory=list)
