"""Table-of-contents panel built from a heading list."""

from __future__ import annotations

from html import escape
from typing import Sequence

from mongodocs.schemas import Heading, TocEntry

EMPTY_TOC_PLACEHOLDER = "No headings found"
TOC_TITLE = "Contents"


def build_toc(headings: Sequence[Heading], active_id: str | None = None) -> list[TocEntry]:
    """Turn headings into panel rows, flagging the active one."""
    return [
        TocEntry(
            id=heading.id,
            text=heading.text,
            level=heading.level,
            indent=heading.level - 1,
            active=heading.id == active_id,
        )
        for heading in headings
    ]


def render_toc_html(headings: Sequence[Heading], active_id: str | None = None) -> str:
    """Render the panel as an HTML ``<nav>`` with in-page links."""
    entries = build_toc(headings, active_id)
    if not entries:
        body = f'<p class="toc-empty">{EMPTY_TOC_PLACEHOLDER}</p>'
    else:
        items = []
        for entry in entries:
            classes = f"toc-entry toc-indent-{entry.indent}"
            if entry.active:
                classes += " active"
            items.append(
                f'<li class="{classes}"><a href="#{escape(entry.id)}">{escape(entry.text)}</a></li>'
            )
        body = "<ul>" + "".join(items) + "</ul>"
    return f'<nav class="toc"><h2>{TOC_TITLE}</h2>{body}</nav>'
