"""Utility helpers for the routers."""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from mongodocs.content import ContentStore
from mongodocs.exceptions import ContentDecodeError, ContentNotFoundError, FrontmatterError
from mongodocs.pages import build_document_page_async
from mongodocs.schemas import DocumentPage
from mongodocs.utils.logging_config import get_logger
from server.models import ErrorResponse

logger = get_logger(__name__)

COMMON_DOC_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Topic not found"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Article could not be loaded"},
}


async def load_page(store: ContentStore, level: str, topic: str) -> DocumentPage:
    """Build an article page, mapping library errors to HTTP errors."""
    try:
        return await build_document_page_async(store, level, topic)
    except ContentNotFoundError as exc:
        logger.info("Topic not found", extra={"level": level, "topic": topic})
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except (ContentDecodeError, FrontmatterError) as exc:
        logger.error("Unreadable article", extra={"level": level, "topic": topic, "error": str(exc)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Topic {level}/{topic} could not be loaded",
        ) from exc
