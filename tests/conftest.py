"""Test setup for mongodocs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mongodocs.content import ContentStore  # noqa: E402

CRUD_ARTICLE = """# CRUD Operations

Create, read, update and delete.

## Create

```bash
# insert from the shell
mongosh --eval 'db.items.insertOne({ sku: "a1" })'
```

## Read

#### $in and $nin Operators

`$in` matches any value in an array.

## Overview

First overview.

## Overview

Second overview.
"""

INTRO_ARTICLE = """---
title: Introduction to MongoDB
description: What MongoDB is.
---

# Introduction

MongoDB stores documents.
"""


class FakeViewport:
    """In-memory render target with per-id top offsets.

    ``appear_after`` makes an element report as missing for that many lookups
    before its position becomes visible.
    """

    def __init__(self, positions: dict[str, float] | None = None) -> None:
        self.positions: dict[str, float] = dict(positions or {})
        self.appear_after: dict[str, int] = {}
        self.lookups: dict[str, int] = {}
        self.scrolled: list[str] = []

    def element_top(self, element_id: str) -> float | None:
        count = self.lookups.get(element_id, 0) + 1
        self.lookups[element_id] = count
        if count <= self.appear_after.get(element_id, 0):
            return None
        return self.positions.get(element_id)

    def scroll_into_view(self, element_id: str) -> None:
        self.scrolled.append(element_id)


class FakeScrollEvents:
    """Scroll event source that records subscriptions."""

    def __init__(self) -> None:
        self.callbacks: list[Callable[[], object]] = []
        self.unsubscribed = 0

    def subscribe(self, callback: Callable[[], object]) -> Callable[[], None]:
        self.callbacks.append(callback)

        def unsubscribe() -> None:
            self.callbacks.remove(callback)
            self.unsubscribed += 1

        return unsubscribe

    def fire(self) -> None:
        for callback in list(self.callbacks):
            callback()


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Content directory with a couple of articles."""
    basic = tmp_path / "basic"
    basic.mkdir()
    (basic / "crud-operations.md").write_text(CRUD_ARTICLE, encoding="utf-8")
    (basic / "Intro.md").write_text(INTRO_ARTICLE, encoding="utf-8")
    (basic / "notes.txt").write_text("not an article", encoding="utf-8")
    intermediate = tmp_path / "intermediate"
    intermediate.mkdir()
    (intermediate / "indexes.md").write_text("# Indexes\n\nIndexes speed up reads.\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def store(content_dir: Path) -> ContentStore:
    return ContentStore(content_dir)


@pytest.fixture
def viewport() -> FakeViewport:
    return FakeViewport()


@pytest.fixture
def scroll_events() -> FakeScrollEvents:
    return FakeScrollEvents()
