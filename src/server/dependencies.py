"""Request dependencies shared by the routers."""

from __future__ import annotations

from functools import lru_cache

from mongodocs.config import MONGODOCS_CONTENT_PATH
from mongodocs.content import ContentStore


@lru_cache(maxsize=1)
def get_store() -> ContentStore:
    """Content store rooted at ``MONGODOCS_CONTENT_PATH``.

    Tests swap it through ``app.dependency_overrides``.
    """
    return ContentStore(MONGODOCS_CONTENT_PATH)
