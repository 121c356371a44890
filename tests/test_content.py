"""Tests for the content store and front matter parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from mongodocs.content import ContentStore, split_frontmatter
from mongodocs.exceptions import ContentDecodeError, FrontmatterError


class TestSplitFrontmatter:
    """Tests for split_frontmatter function."""

    def test_parses_mapping_and_strips_block(self) -> None:
        data, body = split_frontmatter("---\ntitle: Indexes\ntags: [a, b]\n---\n# Indexes\n")
        assert data == {"title": "Indexes", "tags": ["a", "b"]}
        assert body == "# Indexes\n"

    def test_text_without_block_is_untouched(self) -> None:
        text = "# Title\n\n---\n\nbody\n"
        assert split_frontmatter(text) == ({}, text)

    def test_unterminated_block_is_treated_as_body(self) -> None:
        text = "---\ntitle: nope\n# Title\n"
        assert split_frontmatter(text) == ({}, text)

    def test_empty_block(self) -> None:
        assert split_frontmatter("---\n---\nbody") == ({}, "body")

    def test_byte_order_mark_is_ignored(self) -> None:
        data, body = split_frontmatter("\ufeff---\ntitle: X\n---\nbody")
        assert data == {"title": "X"}
        assert body == "body"

    def test_invalid_yaml_raises(self) -> None:
        with pytest.raises(FrontmatterError, match="Invalid front matter"):
            split_frontmatter("---\ntitle: [unclosed\n---\nbody")

    def test_non_mapping_raises(self) -> None:
        with pytest.raises(FrontmatterError, match="mapping"):
            split_frontmatter("---\n- a\n- b\n---\nbody")


class TestContentStore:
    """Tests for ContentStore class."""

    def test_loads_article_with_frontmatter(self, store: ContentStore) -> None:
        document = store.get_markdown_content("basic", "introduction")

        assert document is not None
        assert document.level == "basic"
        assert document.topic == "introduction"
        assert document.frontmatter["title"] == "Introduction to MongoDB"
        assert document.content.lstrip().startswith("# Introduction")

    def test_loads_article_named_after_topic(self, store: ContentStore) -> None:
        document = store.get_markdown_content("basic", "crud-operations")
        assert document is not None
        assert document.frontmatter == {}

    def test_missing_article_returns_none(self, store: ContentStore) -> None:
        assert store.get_markdown_content("basic", "sharding") is None
        assert store.get_markdown_content("nope", "crud-operations") is None

    @pytest.mark.parametrize(
        ("level", "topic"),
        [("..", "basic"), ("basic", "../basic/crud-operations"), ("basic", ".hidden"), ("", "x")],
    )
    def test_unsafe_segments_are_rejected(self, store: ContentStore, level: str, topic: str) -> None:
        assert store.path_for(level, topic) is None
        assert store.get_markdown_content(level, topic) is None

    def test_path_uses_file_name_map(self, store: ContentStore, content_dir: Path) -> None:
        assert store.path_for("basic", "introduction") == content_dir / "basic" / "Intro.md"
        assert store.path_for("basic", "querying") == content_dir / "basic" / "querying.md"

    def test_lists_topics_of_level(self, store: ContentStore) -> None:
        assert store.get_all_topics("basic") == ["crud-operations", "introduction"]
        assert store.get_all_topics("intermediate") == ["indexes"]

    def test_listing_unknown_level_is_empty(self, store: ContentStore) -> None:
        assert store.get_all_topics("expert") == []
        assert store.get_all_topics("../etc") == []

    def test_lists_levels(self, store: ContentStore) -> None:
        assert store.get_all_levels() == ["basic", "intermediate"]

    def test_missing_root(self, tmp_path: Path) -> None:
        assert ContentStore(tmp_path / "absent").get_all_levels() == []

    def test_broken_frontmatter_propagates(self, content_dir: Path, store: ContentStore) -> None:
        (content_dir / "basic" / "broken.md").write_text("---\ntitle: [unclosed\n---\n# Broken\n", encoding="utf-8")
        with pytest.raises(FrontmatterError):
            store.get_markdown_content("basic", "broken")

    def test_non_utf8_article_raises_library_error(self, content_dir: Path, store: ContentStore) -> None:
        (content_dir / "basic" / "latin1.md").write_bytes("# Café\n".encode("latin-1"))
        with pytest.raises(ContentDecodeError, match="basic/latin1"):
            store.get_markdown_content("basic", "latin1")
