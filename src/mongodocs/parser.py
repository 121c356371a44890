"""Markdown tokenizer shared by the heading indexer and the HTML renderer."""

from __future__ import annotations

from markdown_it import MarkdownIt


def create_parser() -> MarkdownIt:
    """Build the parser used for articles.

    CommonMark plus GFM tables and strikethrough. Raw HTML in articles is
    escaped. Fenced code blocks get a ``language-<name>`` class.
    """
    return MarkdownIt("commonmark", {"html": False}).enable(["table", "strikethrough"])


PARSER = create_parser()
