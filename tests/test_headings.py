"""Tests for heading extraction and slug assignment."""

from __future__ import annotations

import pytest

from mongodocs.headings import SlugRegistry, extract_headings, slugify

from conftest import CRUD_ARTICLE


class TestSlugify:
    """Tests for slugify function."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("  $in and $nin Operators  ", "in-and-nin-operators"),
            ("Overview", "overview"),
            ("CRUD: Create & Read", "crud-create-read"),
            ("Tabs\tand   spaces", "tabs-and-spaces"),
            ("snake_case stays", "snake_case-stays"),
            ("Already-hyphenated -- text", "already-hyphenated-text"),
            ("`db.collection.find()`", "dbcollectionfind"),
            ("Café Society", "caf-society"),
        ],
    )
    def test_slug_rules(self, text: str, expected: str) -> None:
        assert slugify(text) == expected

    def test_punctuation_only_gives_empty_slug(self) -> None:
        """A label made only of punctuation slugifies to the empty string."""
        assert slugify("?!") == ""


class TestSlugRegistry:
    """Tests for SlugRegistry class."""

    def test_repeats_get_numbered_suffixes(self) -> None:
        registry = SlugRegistry()
        assert [registry.assign("faq") for _ in range(3)] == ["faq", "faq-1", "faq-2"]

    def test_suffix_skips_ids_already_taken(self) -> None:
        """A literal ``base-1`` heading is not reused for the second ``base``."""
        registry = SlugRegistry()
        assert registry.assign("step") == "step"
        assert registry.assign("step-1") == "step-1"
        assert registry.assign("step") == "step-2"

    def test_tracks_used_ids(self) -> None:
        registry = SlugRegistry()
        registry.assign("a")
        registry.assign("a")
        assert "a" in registry
        assert "a-1" in registry
        assert len(registry) == 2


class TestExtractHeadings:
    """Tests for extract_headings function."""

    def test_distinct_headings_in_source_order(self) -> None:
        text = "# One\n\nbody\n\n## Two\n\n### Three\n\n#### Four\n"
        headings = extract_headings(text)

        assert [h.text for h in headings] == ["One", "Two", "Three", "Four"]
        assert [h.level for h in headings] == [1, 2, 3, 4]
        assert [h.id for h in headings] == ["one", "two", "three", "four"]
        assert len({h.id for h in headings}) == len(headings)

    def test_duplicate_titles_are_disambiguated(self) -> None:
        headings = extract_headings("## Overview\n\ntext\n\n## Overview\n")
        assert [h.id for h in headings] == ["overview", "overview-1"]

    def test_order_follows_document_not_level(self) -> None:
        headings = extract_headings("### Deep\n# Top\n## Middle\n")
        assert [h.level for h in headings] == [3, 1, 2]

    def test_special_characters_stripped_from_id(self) -> None:
        headings = extract_headings("####   $in and $nin Operators  \n")
        assert headings[0].text == "$in and $nin Operators"
        assert headings[0].id == "in-and-nin-operators"

    def test_no_headings_returns_empty_list(self) -> None:
        assert extract_headings("Just a paragraph.\n\nAnother one.") == []
        assert extract_headings("") == []

    @pytest.mark.parametrize(
        "line",
        ["#NoSpace", "##### Five markers", "###### Six markers", "  # Indented", "text # not at start"],
    )
    def test_lines_that_are_not_headings(self, line: str) -> None:
        assert extract_headings(line) == []

    def test_marker_without_label_is_ignored(self) -> None:
        assert extract_headings("#   \n## Real\n")[0].id == "real"
        assert len(extract_headings("#   \n## Real\n")) == 1

    def test_fenced_code_is_skipped(self) -> None:
        headings = extract_headings(CRUD_ARTICLE)
        assert "insert-from-the-shell" not in [h.id for h in headings]

    def test_tilde_fence_and_longer_closing_fence(self) -> None:
        text = "~~~\n# hidden\n~~~~\n# Shown\n````\n# hidden too\n```\n# still hidden\n````\n## After\n"
        assert [h.text for h in extract_headings(text)] == ["Shown", "After"]

    def test_records_source_lines(self) -> None:
        headings = extract_headings("intro\n\n# A\r\ntext\r\n## B\n")
        assert [h.line for h in headings] == [2, 4]

    def test_empty_slug_falls_back_to_position(self) -> None:
        headings = extract_headings("# Title\n## ???\n## !!!\n")
        assert [h.id for h in headings] == ["title", "section-2", "section-3"]

    def test_full_article(self) -> None:
        ids = [h.id for h in extract_headings(CRUD_ARTICLE)]
        assert ids == [
            "crud-operations",
            "create",
            "read",
            "in-and-nin-operators",
            "overview",
            "overview-1",
        ]

    def test_repeated_extraction_is_identical(self) -> None:
        first = extract_headings(CRUD_ARTICLE)
        second = extract_headings(CRUD_ARTICLE)
        assert [h.model_dump() for h in first] == [h.model_dump() for h in second]

    def test_list_item_fence_follows_parser(self) -> None:
        """An unindented line ends the list item, so the fence runs to the end."""
        text = "- item\n  ```bash\n# comment\n  ```\n\n## After\n"
        assert [h.text for h in extract_headings(text)] == ["comment"]

    def test_headings_inside_containers_are_skipped(self) -> None:
        text = "> # Quoted\n\n- ## Listed\n\n## Kept\n"
        assert [h.id for h in extract_headings(text)] == ["kept"]
