"""Render Markdown articles to HTML with table-of-contents anchors."""

from __future__ import annotations

import logging
from typing import Sequence

from markdown_it.token import Token

from mongodocs.headings import extract_headings
from mongodocs.parser import PARSER
from mongodocs.schemas import Heading

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

HEADING_MARKER_ATTR = "data-heading"


def render_markdown(raw_text: str, headings: Sequence[Heading] | None = None) -> str:
    """Convert an article to HTML.

    Each heading the indexer recognised gets its ``id`` attribute from the
    heading list entry that sits on the same source line, so anchors and
    table-of-contents links always agree.

    Parameters
    ----------
    raw_text : str
        The Markdown body (without front matter).
    headings : Sequence[Heading] | None
        Heading list previously extracted from ``raw_text``. Extracted here
        when omitted.
    """
    if headings is None:
        headings = extract_headings(raw_text)
    by_line = {heading.line: heading for heading in headings}

    env: dict = {}
    tokens = PARSER.parse(raw_text, env)
    assigned = _assign_heading_ids(tokens, by_line)
    if assigned != len(by_line):
        logger.warning(
            "Rendered %d of %d heading anchors",
            assigned,
            len(by_line),
        )
    return PARSER.renderer.render(tokens, PARSER.options, env)


def _assign_heading_ids(tokens: list[Token], by_line: dict[int, Heading]) -> int:
    assigned = 0
    for token in tokens:
        if token.type != "heading_open" or not token.map:
            continue
        heading = by_line.get(token.map[0])
        if heading is None or int(token.tag[1]) != heading.level:
            continue
        token.attrSet("id", heading.id)
        token.attrSet(HEADING_MARKER_ATTR, str(heading.level))
        assigned += 1
    return assigned


def anchor_ids(html: str) -> list[str]:
    """Return the ids of rendered heading anchors, in document order."""
    soup = BeautifulSoup(html, "lxml")
    return [tag["id"] for tag in soup.find_all(attrs={HEADING_MARKER_ATTR: True}) if tag.get("id")]
