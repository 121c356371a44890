"""Shared schemas for mongodocs."""

from mongodocs.schemas.documents import Document, DocumentPage, PageMetadata
from mongodocs.schemas.headings import Heading, TocEntry
from mongodocs.schemas.search import SearchHit
from mongodocs.schemas.topics import TopicEntry, TopicGroup

__all__ = [
    "Document",
    "DocumentPage",
    "Heading",
    "PageMetadata",
    "SearchHit",
    "TocEntry",
    "TopicEntry",
    "TopicGroup",
]
