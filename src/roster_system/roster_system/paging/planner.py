"""Paged query planner.

Pure state transitions for searchable, paginated lists. Debouncing is left to
the caller: it feeds ``SearchChanged`` on every keystroke and ``SearchSettled``
once the quiet period elapsed, and only dispatches ``to_query`` results.
"""

from __future__ import annotations

import threading
from dataclasses import replace

from .model import (
    PageEvent,
    PageQuery,
    PageRequested,
    PageSizeChanged,
    PageState,
    ResultsLoaded,
    SearchChanged,
    SearchSettled,
)


def _clamp(page: int, total_pages: int) -> int:
    return min(max(int(page), 1), total_pages)


def plan(previous: PageState, event: PageEvent) -> PageState:
    if isinstance(event, SearchChanged):
        if event.text == previous.search_text:
            return previous
        return replace(previous, search_text=event.text, page=1)

    if isinstance(event, SearchSettled):
        if previous.applied_search_text == previous.search_text:
            return previous
        return replace(previous, applied_search_text=previous.search_text, page=1)

    if isinstance(event, PageRequested):
        return replace(previous, page=_clamp(event.page, previous.total_pages))

    if isinstance(event, PageSizeChanged):
        if int(event.page_size) <= 0:
            raise ValueError(f"page size must be positive, got {event.page_size!r}")
        return replace(previous, page_size=int(event.page_size), page=1)

    if isinstance(event, ResultsLoaded):
        loaded = replace(previous, total_count=max(int(event.total_count), 0))
        return replace(loaded, page=_clamp(loaded.page, loaded.total_pages))

    raise TypeError(f"Unsupported paging event: {type(event)!r}")


def to_query(state: PageState) -> PageQuery:
    return PageQuery(
        page=state.page,
        limit=state.page_size,
        offset=(state.page - 1) * state.page_size,
        search=state.applied_search_text.strip(),
    )


class RequestSequencer:
    """Monotonic request tokens.

    Issue a token per dispatched query and apply a response only while
    ``is_current`` holds for its token; anything older was superseded.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._latest = 0

    def issue(self) -> int:
        with self._lock:
            self._latest += 1
            return self._latest

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._latest

    @property
    def latest(self) -> int:
        return self._latest
