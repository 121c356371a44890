"""Command line access to articles: table of contents, search and topic listing."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Sequence

from mongodocs.config import MONGODOCS_CONTENT_PATH, MONGODOCS_SEARCH_MAX_RESULTS
from mongodocs.content import ContentStore
from mongodocs.exceptions import MongoDocsError
from mongodocs.headings import extract_headings
from mongodocs.navigation import EMPTY_TOC_PLACEHOLDER
from mongodocs.search import NO_RESULTS_TEXT, search_documents
from mongodocs.utils.logging_config import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mongodocs", description="Browse MongoDB documentation articles.")
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=MONGODOCS_CONTENT_PATH,
        help="Directory holding one sub-directory of articles per level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    toc = subparsers.add_parser("toc", help="Print the table of contents of an article")
    toc.add_argument("level")
    toc.add_argument("topic")
    toc.add_argument("--json", action="store_true", help="Emit the heading list as JSON")

    search = subparsers.add_parser("search", help="Find lines containing a phrase")
    search.add_argument("query")
    search.add_argument("--level")
    search.add_argument("--topic")
    search.add_argument("--limit", type=int, default=MONGODOCS_SEARCH_MAX_RESULTS)

    topics = subparsers.add_parser("topics", help="List available topics")
    topics.add_argument("level", nargs="?")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    store = ContentStore(args.content_dir)

    try:
        if args.command == "toc":
            return _print_toc(store, args.level, args.topic, as_json=args.json)
        if args.command == "search":
            return _print_search(store, args.query, level=args.level, topic=args.topic, limit=args.limit)
        return _print_topics(store, args.level)
    except MongoDocsError as exc:
        logger.error("Command failed", extra={"command": args.command, "error": str(exc)})
        return 1


def _print_toc(store: ContentStore, level: str, topic: str, *, as_json: bool) -> int:
    document = store.get_markdown_content(level, topic)
    if document is None:
        print(f"Topic {level}/{topic} not found")
        return 1

    headings = extract_headings(document.content)
    if as_json:
        print(json.dumps([heading.model_dump() for heading in headings], indent=2))
    elif not headings:
        print(EMPTY_TOC_PLACEHOLDER)
    else:
        for heading in headings:
            print(f"{'  ' * (heading.level - 1)}- {heading.text} (#{heading.id})")
    return 0


def _print_search(store: ContentStore, query: str, *, level: str | None, topic: str | None, limit: int) -> int:
    hits = search_documents(store, query, level=level, topic=topic, limit=limit)
    if not hits:
        print(NO_RESULTS_TEXT)
        return 0
    for hit in hits:
        print(f"{hit.level}/{hit.topic}:{hit.line_number}: {hit.line.strip()}")
    return 0


def _print_topics(store: ContentStore, level: str | None) -> int:
    levels = [level] if level else store.get_all_levels()
    for level_name in levels:
        print(f"{level_name}:")
        for topic in store.get_all_topics(level_name):
            print(f"  {topic}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
