"""mongodocs: MongoDB documentation articles with table-of-contents tracking."""

from mongodocs.content import ContentStore
from mongodocs.exceptions import ContentDecodeError, ContentNotFoundError, FrontmatterError, MongoDocsError
from mongodocs.headings import SlugRegistry, extract_headings, slugify
from mongodocs.markdown import render_markdown
from mongodocs.pages import build_document_page, build_page_metadata
from mongodocs.schemas import Document, DocumentPage, Heading, PageMetadata, SearchHit
from mongodocs.search import search_documents, search_lines
from mongodocs.tracker import ActiveSectionTracker, DocumentView

__all__ = [
    "ActiveSectionTracker",
    "ContentDecodeError",
    "ContentNotFoundError",
    "ContentStore",
    "Document",
    "DocumentPage",
    "DocumentView",
    "FrontmatterError",
    "Heading",
    "MongoDocsError",
    "PageMetadata",
    "SearchHit",
    "SlugRegistry",
    "build_document_page",
    "build_page_metadata",
    "extract_headings",
    "render_markdown",
    "search_documents",
    "search_lines",
    "slugify",
]
