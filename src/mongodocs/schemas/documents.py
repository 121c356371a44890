"""Document and page models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from mongodocs.schemas.headings import Heading


class Document(BaseModel):
    """An article loaded from the content store.

    Attributes:
        level: Level directory the article lives in (e.g., "basic").
        topic: Topic slug requested (e.g., "crud-operations").
        content: Markdown body with the front matter block removed.
        frontmatter: Parsed front matter mapping, empty when absent.
    """

    level: str
    topic: str
    content: str
    frontmatter: dict[str, Any] = Field(default_factory=dict)


class PageMetadata(BaseModel):
    """Head metadata for a rendered page."""

    title: str
    description: str
    open_graph: dict[str, str] = Field(default_factory=dict)
    twitter: dict[str, str] = Field(default_factory=dict)


class DocumentPage(BaseModel):
    """Everything needed to display one article."""

    level: str
    topic: str
    metadata: PageMetadata
    headings: list[Heading] = Field(default_factory=list)
    html: str
