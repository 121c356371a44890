"""Server-rendered article pages."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from mongodocs.content import ContentStore
from server.dependencies import get_store
from server.rendering import render_page
from server.routers_utils import load_page

router = APIRouter()


@router.get("/learn/{level}/{topic}", response_class=HTMLResponse)
async def article_page(
    level: str,
    topic: str,
    store: Annotated[ContentStore, Depends(get_store)],
) -> HTMLResponse:
    """Serve an article with its sidebar and table of contents."""
    page = await load_page(store, level, topic)
    return HTMLResponse(render_page(page))
