from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.request_args import arg_int
from ..common.serializers import to_jsonable
from ..core.constants import PAGE_SIZE_OPTIONS, SEARCH_DEBOUNCE_MS
from ..paging.model import PageState


def register(app: Flask, container) -> None:
    default_page_size = int(app.config.get("DEFAULT_PAGE_SIZE", 9))

    @app.route("/api/players", methods=["GET"], endpoint="players_list")
    def players_list():
        """Server side of the paged player list.

        The client debounces typing; by the time a request arrives its search
        text is the applied one.
        """

        search = (request.args.get("search") or "").strip()
        state = PageState(
            page=max(arg_int(request.args, "page") or 1, 1),
            page_size=max(arg_int(request.args, "limit") or default_page_size, 1),
            search_text=search,
            applied_search_text=search,
        )
        result = container.player_service.list_page(state)
        return jsonify(
            {
                "players": to_jsonable(result.players),
                "pagination": {
                    "page": result.page,
                    "limit": result.page_size,
                    "total": result.total,
                    "totalPages": result.total_pages,
                },
                "meta": {"pageSizeOptions": list(PAGE_SIZE_OPTIONS), "searchDebounceMs": SEARCH_DEBOUNCE_MS},
            }
        )
