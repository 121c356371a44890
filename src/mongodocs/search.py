"""Line-oriented substring search over loaded articles."""

from __future__ import annotations

import logging
import re
from html import escape

from mongodocs.config import MONGODOCS_SEARCH_MAX_RESULTS
from mongodocs.content import ContentStore
from mongodocs.exceptions import MongoDocsError
from mongodocs.schemas import SearchHit

logger = logging.getLogger(__name__)

NO_RESULTS_TEXT = "No results found"


def search_lines(content: str, query: str) -> list[SearchHit]:
    """Return every line of ``content`` containing ``query``, case-insensitively.

    ``highlighted`` holds the HTML-escaped line with each match wrapped in
    ``<mark>``. A blank query matches nothing.
    """
    needle = query.strip()
    if not needle:
        return []

    pattern = re.compile(f"({re.escape(needle)})", re.IGNORECASE)
    lowered = needle.lower()
    hits: list[SearchHit] = []
    for number, line in enumerate(content.splitlines(), start=1):
        if lowered not in line.lower():
            continue
        hits.append(SearchHit(line_number=number, line=line, highlighted=highlight(line, pattern)))
    return hits


def highlight(line: str, pattern: re.Pattern[str]) -> str:
    parts = pattern.split(line)
    # re.split with one capture group alternates plain text and matches.
    return "".join(
        f"<mark>{escape(part)}</mark>" if index % 2 else escape(part)
        for index, part in enumerate(parts)
    )


def search_documents(
    store: ContentStore,
    query: str,
    *,
    level: str | None = None,
    topic: str | None = None,
    limit: int = MONGODOCS_SEARCH_MAX_RESULTS,
) -> list[SearchHit]:
    """Search articles in the store, optionally narrowed to a level or topic.

    Results are ordered by level, topic and line number, and capped at ``limit``.
    Articles that cannot be loaded are logged and skipped.
    """
    if not query.strip() or limit <= 0:
        return []

    levels = [level] if level else store.get_all_levels()
    hits: list[SearchHit] = []
    for level_name in levels:
        topics = [topic] if topic else store.get_all_topics(level_name)
        for topic_name in topics:
            try:
                document = store.get_markdown_content(level_name, topic_name)
            except MongoDocsError as exc:
                logger.warning(
                    "Skipping unreadable article",
                    extra={"level": level_name, "topic": topic_name, "error": str(exc)},
                )
                continue
            if document is None:
                continue
            for hit in search_lines(document.content, query):
                hits.append(hit.model_copy(update={"level": level_name, "topic": topic_name}))
                if len(hits) >= limit:
                    return hits
    return hits
