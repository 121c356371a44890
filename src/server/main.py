"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

# Import logging configuration first to intercept all logging
from mongodocs.utils.logging_config import get_logger
from server.routers import docs_router, pages_router
from server.server_config import APP_DESCRIPTION, APP_TITLE, APP_VERSION

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Build the application with all routers mounted."""
    application = FastAPI(title=APP_TITLE, description=APP_DESCRIPTION, version=APP_VERSION)
    application.include_router(docs_router)
    application.include_router(pages_router)
    return application


app = create_app()
