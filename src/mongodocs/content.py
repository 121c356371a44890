"""Load Markdown articles and their front matter from the content directory."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from mongodocs.config import MONGODOCS_CONTENT_PATH
from mongodocs.exceptions import ContentDecodeError, FrontmatterError
from mongodocs.schemas import Document

logger = logging.getLogger(__name__)

# Topics whose file name does not follow the ``<topic>.md`` convention.
FILE_NAME_MAP: dict[str, str] = {
    "introduction": "Intro.md",
}
_TOPIC_BY_FILE_NAME = {file_name: topic for topic, file_name in FILE_NAME_MAP.items()}

MARKDOWN_SUFFIX = ".md"

_SEGMENT_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.\-]*$")
_FRONTMATTER_DELIMITER = "---"


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Separate a leading YAML front matter block from the Markdown body.

    The block must open on the first line with ``---`` and close with a line
    holding only ``---``. Text without a complete block is returned untouched
    with empty metadata.

    Raises:
        FrontmatterError: If the block is not valid YAML or is not a mapping.
    """
    text = text.lstrip("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != _FRONTMATTER_DELIMITER:
        return {}, text

    for index in range(1, len(lines)):
        if lines[index].rstrip() == _FRONTMATTER_DELIMITER:
            block = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            break
    else:
        return {}, text

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"Invalid front matter: {exc}") from exc

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontmatterError("Front matter must be a mapping")
    return data, body


class ContentStore:
    """Read-only view over ``<root>/<level>/<topic>.md`` articles."""

    def __init__(self, root: Path | str = MONGODOCS_CONTENT_PATH) -> None:
        self.root = Path(root)

    def path_for(self, level: str, topic: str) -> Path | None:
        """Resolve the file path for an article, or None for unsafe segments."""
        if not (_is_safe_segment(level) and _is_safe_segment(topic)):
            return None
        file_name = FILE_NAME_MAP.get(topic, f"{topic}{MARKDOWN_SUFFIX}")
        return self.root / level / file_name

    def get_markdown_content(self, level: str, topic: str) -> Document | None:
        """Load an article with its front matter.

        Returns:
            The document, or None when it does not exist.

        Raises:
            ContentDecodeError: If the article file is not UTF-8 encoded.
            FrontmatterError: If the article exists but its front matter is broken.
        """
        path = self.path_for(level, topic)
        if path is None or not path.is_file():
            logger.debug("Article not found: %s/%s", level, topic)
            return None

        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ContentDecodeError(f"Article {level}/{topic} is not valid UTF-8: {exc.reason}") from exc

        frontmatter, content = split_frontmatter(text)
        return Document(level=level, topic=topic, content=content, frontmatter=frontmatter)

    def get_all_topics(self, level: str) -> list[str]:
        """List the article stems available for a level, sorted."""
        if not _is_safe_segment(level):
            return []
        level_path = self.root / level
        if not level_path.is_dir():
            return []
        return sorted(
            _TOPIC_BY_FILE_NAME.get(path.name, path.stem)
            for path in level_path.iterdir()
            if path.is_file() and path.suffix == MARKDOWN_SUFFIX
        )

    def get_all_levels(self) -> list[str]:
        """List the level directories present under the content root, sorted."""
        if not self.root.is_dir():
            return []
        return sorted(path.name for path in self.root.iterdir() if path.is_dir() and _is_safe_segment(path.name))


def _is_safe_segment(value: str) -> bool:
    return bool(_SEGMENT_RE.match(value)) and ".." not in value
