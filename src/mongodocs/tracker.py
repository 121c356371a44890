"""Scroll-synchronised active-section tracking for one open document view."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Iterable, Protocol

from mongodocs.config import (
    MONGODOCS_NAV_MAX_RETRIES,
    MONGODOCS_NAV_RETRY_INTERVAL_S,
    MONGODOCS_SCROLL_THRESHOLD_PX,
)
from mongodocs.headings import extract_headings
from mongodocs.schemas import Heading

logger = logging.getLogger(__name__)


class Viewport(Protocol):
    """Render target holding one anchor element per heading id."""

    def element_top(self, element_id: str) -> float | None:
        """Top offset of the element relative to the viewport, or None if not rendered."""

    def scroll_into_view(self, element_id: str) -> None:
        """Smoothly scroll so the element's top edge meets the viewport top."""


class ScrollEvents(Protocol):
    """Source of viewport scroll notifications."""

    def subscribe(self, callback: Callable[[], object]) -> Callable[[], None]:
        """Register ``callback`` and return a function that unregisters it."""


class ActiveSectionTracker:
    """Keep one heading id marked active as the viewport scrolls.

    Args:
        headings: Heading list of the open document, in document order.
        viewport: Render target used for element lookups and scrolling.
        threshold: Reading line in pixels from the viewport top. A heading whose
            top is at or above it counts as passed.
        retry_interval: Seconds between element lookups while navigating to a
            heading that is not rendered yet.
        max_retries: Additional lookups before navigation gives up.
    """

    def __init__(
        self,
        headings: Iterable[Heading],
        viewport: Viewport,
        *,
        threshold: float = MONGODOCS_SCROLL_THRESHOLD_PX,
        retry_interval: float = MONGODOCS_NAV_RETRY_INTERVAL_S,
        max_retries: int = MONGODOCS_NAV_MAX_RETRIES,
    ) -> None:
        self.viewport = viewport
        self.threshold = threshold
        self.retry_interval = retry_interval
        self.max_retries = max_retries
        self.headings: list[Heading] = []
        self.active_id: str | None = None
        self._generation = 0
        self.load(headings)

    def load(self, headings: Iterable[Heading]) -> None:
        """Switch to a new heading list and pre-select its first heading."""
        self.headings = list(headings)
        self.active_id = self.headings[0].id if self.headings else None
        self.cancel_navigation()

    def on_scroll(self) -> str | None:
        """Recompute the active heading from current element positions.

        Scans from the last heading up; the first one whose top is within the
        threshold wins. When none qualifies the active id is left as is.
        """
        for heading in reversed(self.headings):
            top = self.viewport.element_top(heading.id)
            if top is None:
                continue
            if top <= self.threshold:
                self.active_id = heading.id
                break
        return self.active_id

    async def navigate_to(self, heading_id: str) -> bool:
        """Activate ``heading_id`` and scroll its anchor into view.

        Polls for the anchor element while it is not rendered yet. A later call
        to ``navigate_to`` (or :meth:`load`) supersedes this one.

        Returns:
            True if the element was found and scrolled to, False otherwise.
        """
        self._generation += 1
        generation = self._generation

        if self._try_navigate(heading_id):
            return True

        for _ in range(self.max_retries):
            await asyncio.sleep(self.retry_interval)
            if generation != self._generation:
                logger.debug("Navigation to %s superseded", heading_id)
                return False
            if self._try_navigate(heading_id):
                return True

        logger.debug("Anchor %s not rendered after %d retries", heading_id, self.max_retries)
        return False

    def cancel_navigation(self) -> None:
        """Make any in-flight navigation retry loop give up."""
        self._generation += 1

    def _try_navigate(self, heading_id: str) -> bool:
        if self.viewport.element_top(heading_id) is None:
            return False
        self.active_id = heading_id
        self.viewport.scroll_into_view(heading_id)
        return True


class DocumentView:
    """One open document: its heading list, tracker and scroll subscription.

    Use as a (sync or async) context manager so the scroll listener is
    released deterministically when the view is torn down.
    """

    def __init__(
        self,
        raw_text: str,
        viewport: Viewport,
        events: ScrollEvents,
        *,
        threshold: float = MONGODOCS_SCROLL_THRESHOLD_PX,
        retry_interval: float = MONGODOCS_NAV_RETRY_INTERVAL_S,
        max_retries: int = MONGODOCS_NAV_MAX_RETRIES,
    ) -> None:
        self.headings = extract_headings(raw_text)
        self.tracker = ActiveSectionTracker(
            self.headings,
            viewport,
            threshold=threshold,
            retry_interval=retry_interval,
            max_retries=max_retries,
        )
        self._events = events
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def active_id(self) -> str | None:
        return self.tracker.active_id

    @property
    def is_open(self) -> bool:
        return self._unsubscribe is not None

    def open(self) -> DocumentView:
        if self._unsubscribe is None:
            self._unsubscribe = self._events.subscribe(self.tracker.on_scroll)
        return self

    def close(self) -> None:
        self.tracker.cancel_navigation()
        if self._unsubscribe is not None:
            unsubscribe, self._unsubscribe = self._unsubscribe, None
            unsubscribe()

    def reload(self, raw_text: str) -> None:
        """Re-index after the document text changed."""
        self.headings = extract_headings(raw_text)
        self.tracker.load(self.headings)

    async def navigate_to(self, heading_id: str) -> bool:
        return await self.tracker.navigate_to(heading_id)

    def __enter__(self) -> DocumentView:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    async def __aenter__(self) -> DocumentView:
        return self.open()

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()
