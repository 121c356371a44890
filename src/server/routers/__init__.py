"""API and page routers."""

from server.routers.docs import router as docs_router
from server.routers.pages import router as pages_router

__all__ = ["docs_router", "pages_router"]
