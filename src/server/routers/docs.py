"""JSON endpoints for articles, headings, topics and search."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from mongodocs.content import ContentStore
from mongodocs.navigation import build_toc
from mongodocs.search import search_documents
from mongodocs.topics import TOPIC_GROUPS
from server.dependencies import get_store
from server.models import DocumentResponse, HeadingsResponse, HealthResponse, SearchResponse, TopicsResponse
from server.routers_utils import COMMON_DOC_RESPONSES, load_page
from server.server_config import DEFAULT_SEARCH_LIMIT, MAX_SEARCH_LIMIT

router = APIRouter()

StoreDep = Annotated[ContentStore, Depends(get_store)]


@router.get("/health", response_model=HealthResponse)
async def health(store: StoreDep) -> HealthResponse:
    """Report that the server is up and where it reads articles from."""
    return HealthResponse(content_path=str(store.root))


@router.get("/api/topics", response_model=TopicsResponse)
def list_topics(store: StoreDep) -> TopicsResponse:
    """Return the sidebar catalogue and the topics present on disk."""
    available = {level: store.get_all_topics(level) for level in store.get_all_levels()}
    return TopicsResponse(groups=TOPIC_GROUPS, available=available)


@router.get("/api/learn/{level}/{topic}", response_model=DocumentResponse, responses=COMMON_DOC_RESPONSES)
async def get_document(level: str, topic: str, store: StoreDep) -> DocumentResponse:
    """Return an article rendered to HTML with its heading list.

    **Raises**

    - **HTTPException**: **404** - the article does not exist
    """
    page = await load_page(store, level, topic)
    active_id = page.headings[0].id if page.headings else None
    return DocumentResponse(
        level=page.level,
        topic=page.topic,
        metadata=page.metadata,
        headings=page.headings,
        toc=build_toc(page.headings, active_id),
        html=page.html,
    )


@router.get("/api/learn/{level}/{topic}/headings", response_model=HeadingsResponse, responses=COMMON_DOC_RESPONSES)
async def get_headings(level: str, topic: str, store: StoreDep) -> HeadingsResponse:
    """Return only the heading list of an article."""
    page = await load_page(store, level, topic)
    return HeadingsResponse(
        level=page.level,
        topic=page.topic,
        headings=page.headings,
        active_id=page.headings[0].id if page.headings else None,
    )


@router.get("/api/search", response_model=SearchResponse)
def search(
    store: StoreDep,
    q: Annotated[str, Query(description="Text to look for, case-insensitive")],
    level: Annotated[str | None, Query(description="Restrict to one level")] = None,
    topic: Annotated[str | None, Query(description="Restrict to one topic")] = None,
    limit: Annotated[int, Query(ge=1, le=MAX_SEARCH_LIMIT)] = DEFAULT_SEARCH_LIMIT,
) -> SearchResponse:
    """Find article lines containing ``q``."""
    hits = search_documents(store, q, level=level, topic=topic, limit=limit)
    return SearchResponse(query=q, total=len(hits), hits=hits)
