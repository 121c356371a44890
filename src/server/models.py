"""Pydantic models for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mongodocs.schemas import Heading, PageMetadata, SearchHit, TocEntry, TopicGroup


class TopicsResponse(BaseModel):
    """Response model for the /api/topics endpoint.

    Attributes
    ----------
    groups : list[TopicGroup]
        Sidebar catalogue, one group per level.
    available : dict[str, list[str]]
        Topics actually present in the content directory, per level.

    """

    groups: list[TopicGroup] = Field(..., description="Sidebar catalogue")
    available: dict[str, list[str]] = Field(default_factory=dict, description="Topics present on disk per level")


class DocumentResponse(BaseModel):
    """Response model for the /api/learn/{level}/{topic} endpoint.

    Attributes
    ----------
    level : str
        Level of the article.
    topic : str
        Topic slug of the article.
    metadata : PageMetadata
        Page title, description and social cards.
    headings : list[Heading]
        Ordered heading list with anchor ids.
    toc : list[TocEntry]
        Navigation panel rows with the first heading active.
    html : str
        Rendered article body.

    """

    level: str
    topic: str
    metadata: PageMetadata
    headings: list[Heading]
    toc: list[TocEntry]
    html: str


class HeadingsResponse(BaseModel):
    """Response model for the /api/learn/{level}/{topic}/headings endpoint."""

    level: str
    topic: str
    headings: list[Heading]
    active_id: str | None = Field(default=None, description="Heading pre-selected on load")


class SearchResponse(BaseModel):
    """Response model for the /api/search endpoint."""

    query: str
    total: int
    hits: list[SearchHit]


class ErrorResponse(BaseModel):
    """Error payload returned with 4xx/5xx responses."""

    detail: str = Field(..., description="Error message")


class HealthResponse(BaseModel):
    """Liveness payload."""

    status: str = "ok"
    content_path: str
