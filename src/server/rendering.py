"""HTML shell around a rendered article."""

from __future__ import annotations

from html import escape

from mongodocs.navigation import render_toc_html
from mongodocs.schemas import DocumentPage
from mongodocs.topics import TOPIC_GROUPS


def render_sidebar(current_slug: str | None = None) -> str:
    """Render the level/topic catalogue, expanding the current level."""
    sections = []
    for group in TOPIC_GROUPS:
        expanded = bool(current_slug) and any(entry.slug == current_slug for entry in group.children)
        items = "".join(
            ('<li class="current">' if entry.slug == current_slug else "<li>")
            + f'<a href="/learn/{escape(entry.slug)}">{escape(entry.title)}</a></li>'
            for entry in group.children
        )
        open_attr = " open" if expanded else ""
        sections.append(f"<details{open_attr}><summary>{escape(group.title)}</summary><ul>{items}</ul></details>")
    return '<aside class="sidebar">' + "".join(sections) + "</aside>"


def render_page(page: DocumentPage) -> str:
    """Render a complete HTML document for an article page."""
    metadata = page.metadata
    active_id = page.headings[0].id if page.headings else None
    meta_tags = [f'<meta name="description" content="{escape(metadata.description)}">']
    meta_tags += [
        f'<meta property="og:{key}" content="{escape(value)}">' for key, value in metadata.open_graph.items()
    ]
    meta_tags += [
        f'<meta name="twitter:{key}" content="{escape(value)}">' for key, value in metadata.twitter.items()
    ]
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{escape(metadata.title)}</title>"
        + "".join(meta_tags)
        + "</head><body>"
        + render_sidebar(f"{page.level}/{page.topic}")
        + f'<main><article class="markdown-content">{page.html}</article></main>'
        + render_toc_html(page.headings, active_id)
        + "</body></html>"
    )
