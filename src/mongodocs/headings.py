"""Heading extraction and slug assignment for table-of-contents building."""

from __future__ import annotations

import re

from mongodocs.parser import PARSER
from mongodocs.schemas import Heading

_HEADING_RE = re.compile(r"^(#{1,4})\s+(.+)$")
_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^\w\-]", re.ASCII)
_MULTI_HYPHEN_RE = re.compile(r"-{2,}")

EMPTY_SLUG_PREFIX = "section"


def slugify(text: str) -> str:
    """Turn a heading label into a lowercase, hyphenated identifier.

    Examples:
        >>> slugify("  $in and $nin Operators  ")
        'in-and-nin-operators'
        >>> slugify("CRUD: Create & Read")
        'crud-create-read'
    """
    slug = str(text).lower().strip()
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _NON_SLUG_RE.sub("", slug)
    return _MULTI_HYPHEN_RE.sub("-", slug)


class SlugRegistry:
    """Hand out document-unique ids for base slugs.

    The first occurrence of a base slug keeps it unchanged; later occurrences
    get ``base-1``, ``base-2`` and so on, in the order they are assigned.
    """

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}
        self._used: set[str] = set()

    def assign(self, base: str) -> str:
        if base not in self._seen:
            self._seen[base] = 0
            if base not in self._used:
                self._used.add(base)
                return base
        count = self._seen[base]
        while True:
            count += 1
            candidate = f"{base}-{count}"
            if candidate not in self._used:
                break
        self._seen[base] = count
        self._used.add(candidate)
        return candidate

    def __contains__(self, slug: object) -> bool:
        return slug in self._used

    def __len__(self) -> int:
        return len(self._used)


def extract_headings(raw_text: str) -> list[Heading]:
    """Return the ordered heading list for a Markdown document.

    Only lines that start with one to four ``#`` markers followed by
    whitespace and a label are headings, and only where the article parser
    also opens a heading on that line. Code blocks, list items and other
    containers therefore never contribute entries the renderer cannot
    anchor. Ids are unique within the returned list; a label whose slug is
    empty falls back to ``section-<n>`` where ``n`` is its 1-based position.
    """
    headings: list[Heading] = []
    registry = SlugRegistry()
    lines = _split_lines(raw_text)

    for index in _heading_lines(raw_text):
        match = _HEADING_RE.match(lines[index])
        if not match:
            continue
        text = match.group(2).strip()
        if not text:
            continue

        base = slugify(text) or f"{EMPTY_SLUG_PREFIX}-{len(headings) + 1}"
        headings.append(
            Heading(
                level=len(match.group(1)),
                text=text,
                id=registry.assign(base),
                line=index,
            )
        )

    return headings


def _heading_lines(raw_text: str) -> list[int]:
    return [
        token.map[0]
        for token in PARSER.parse(raw_text)
        if token.type == "heading_open" and token.map
    ]


def _split_lines(raw_text: str) -> list[str]:
    # Same line numbering markdown-it uses for token maps.
    return raw_text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
