from __future__ import annotations

from ..paging.model import PageState, ResultsLoaded
from ..paging.planner import plan, to_query
from .model import PlayerPage
from .repository import PlayerRepository


class PlayerService:
    """Use case: browse players page by page."""

    def __init__(self, players: PlayerRepository):
        self._players = players

    def list_page(self, state: PageState) -> PlayerPage:
        """Fetch the page ``state`` points at.

        A page past the end of the result set is clamped to the last page
        instead of coming back empty.
        """

        query = to_query(state)
        rows, total = self._players.search(text=query.search, offset=query.offset, limit=query.limit)

        loaded = plan(state, ResultsLoaded(total_count=int(total)))
        if loaded.page != state.page:
            query = to_query(loaded)
            rows, total = self._players.search(text=query.search, offset=query.offset, limit=query.limit)
            loaded = plan(loaded, ResultsLoaded(total_count=int(total)))

        return PlayerPage(
            players=list(rows),
            page=loaded.page,
            page_size=loaded.page_size,
            total=loaded.total_count,
            total_pages=loaded.total_pages,
        )
