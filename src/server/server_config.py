"""Configuration for the server."""

from __future__ import annotations

import os

from mongodocs.config import MONGODOCS_SEARCH_MAX_RESULTS

APP_TITLE = "mongodocs"
APP_DESCRIPTION = "MongoDB documentation articles with table of contents and search."
APP_VERSION = "0.1.0"

DEFAULT_SEARCH_LIMIT = MONGODOCS_SEARCH_MAX_RESULTS
MAX_SEARCH_LIMIT = int(os.getenv("MONGODOCS_MAX_SEARCH_LIMIT", "500"))
