"""Compose article pages: metadata, table of contents and rendered HTML."""

from __future__ import annotations

import asyncio
import logging

from mongodocs.config import SITE_NAME
from mongodocs.content import ContentStore
from mongodocs.exceptions import ContentNotFoundError
from mongodocs.headings import extract_headings
from mongodocs.markdown import render_markdown
from mongodocs.schemas import Document, DocumentPage, PageMetadata
from mongodocs.topics import find_topic, topic_title

logger = logging.getLogger(__name__)

NOT_FOUND_TITLE = "Topic Not Found"
NOT_FOUND_DESCRIPTION = "The requested MongoDB topic could not be found."


def build_page_metadata(level: str, topic: str, document: Document | None) -> PageMetadata:
    """Build head metadata for an article page.

    The title comes from the front matter, then the sidebar catalogue, then
    the topic slug itself. Missing documents get a "not found" title.
    """
    if document is None:
        return PageMetadata(title=NOT_FOUND_TITLE, description=NOT_FOUND_DESCRIPTION)

    entry = find_topic(level, topic)
    title = str(document.frontmatter.get("title") or (entry.title if entry else topic_title(topic)))
    description = str(
        document.frontmatter.get("description")
        or f"Learn about {title} in MongoDB. Comprehensive guide covering {level} level concepts."
    )
    full_title = f"{title} | {SITE_NAME}"

    return PageMetadata(
        title=full_title,
        description=description,
        open_graph={"title": full_title, "description": description, "type": "article"},
        twitter={"card": "summary_large_image", "title": full_title, "description": description},
    )


def build_document_page(store: ContentStore, level: str, topic: str) -> DocumentPage:
    """Load an article and assemble everything the page shows.

    Raises:
        ContentNotFoundError: If the store has no such article.
    """
    document = store.get_markdown_content(level, topic)
    if document is None:
        raise ContentNotFoundError(f"Topic {level}/{topic} not found")

    headings = extract_headings(document.content)
    html = render_markdown(document.content, headings)
    logger.debug("Built page %s/%s with %d headings", level, topic, len(headings))

    return DocumentPage(
        level=level,
        topic=topic,
        metadata=build_page_metadata(level, topic, document),
        headings=headings,
        html=html,
    )


async def build_document_page_async(store: ContentStore, level: str, topic: str) -> DocumentPage:
    """Run :func:`build_document_page` in a worker thread."""
    return await asyncio.to_thread(build_document_page, store, level, topic)
