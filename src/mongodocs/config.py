"""Local configuration for mongodocs."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_CONTENT_DIR = "content"
DEFAULT_SCROLL_THRESHOLD_PX = 200.0
DEFAULT_NAV_RETRY_INTERVAL_S = 0.1
DEFAULT_NAV_MAX_RETRIES = 5
DEFAULT_SEARCH_MAX_RESULTS = 50
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "text"

SITE_NAME = "MongoDB Documentation"

# Root directory holding one sub-directory of Markdown articles per level.
MONGODOCS_CONTENT_PATH = Path(os.getenv("MONGODOCS_CONTENT_PATH", DEFAULT_CONTENT_DIR)).expanduser().resolve()
# Distance from the viewport top of the reading line below the sticky header.
MONGODOCS_SCROLL_THRESHOLD_PX = float(
    os.getenv("MONGODOCS_SCROLL_THRESHOLD_PX", str(DEFAULT_SCROLL_THRESHOLD_PX))
)
MONGODOCS_NAV_RETRY_INTERVAL_S = float(
    os.getenv("MONGODOCS_NAV_RETRY_INTERVAL_S", str(DEFAULT_NAV_RETRY_INTERVAL_S))
)
MONGODOCS_NAV_MAX_RETRIES = int(os.getenv("MONGODOCS_NAV_MAX_RETRIES", str(DEFAULT_NAV_MAX_RETRIES)))
MONGODOCS_SEARCH_MAX_RESULTS = int(os.getenv("MONGODOCS_SEARCH_MAX_RESULTS", str(DEFAULT_SEARCH_MAX_RESULTS)))
MONGODOCS_LOG_LEVEL = os.getenv("MONGODOCS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
MONGODOCS_LOG_FORMAT = os.getenv("MONGODOCS_LOG_FORMAT", DEFAULT_LOG_FORMAT).lower()
