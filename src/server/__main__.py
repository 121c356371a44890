"""Run the documentation server with ``python -m server``.

Reads ``HOST``, ``PORT`` and ``RELOAD`` from the environment. The content
directory and log settings come from the ``MONGODOCS_*`` variables.
"""

import os

import uvicorn

# Logging must be configured before uvicorn creates its loggers
from mongodocs.config import MONGODOCS_CONTENT_PATH
from mongodocs.utils.logging_config import get_logger

logger = get_logger(__name__)


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info(
        "Serving documentation",
        extra={"host": host, "port": port, "content_path": str(MONGODOCS_CONTENT_PATH), "reload": reload},
    )

    # uvicorn logs through the root handler installed by configure_logging
    uvicorn.run("server.main:app", host=host, port=port, reload=reload, log_config=None)


if __name__ == "__main__":
    main()
