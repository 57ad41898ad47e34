from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from ..core.constants import DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class PageState:
    """Caller-owned list state.

    ``search_text`` follows the keyboard; ``applied_search_text`` is what the
    last dispatched query used. They differ while the user is still typing.
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    search_text: str = ""
    applied_search_text: str = ""
    total_count: int = 0

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_count / self.page_size))

    @property
    def is_typing(self) -> bool:
        return self.search_text != self.applied_search_text


@dataclass(frozen=True)
class PageQuery:
    page: int
    limit: int
    offset: int
    search: str


# Events


@dataclass(frozen=True)
class SearchChanged:
    text: str


@dataclass(frozen=True)
class SearchSettled:
    """The debounce quiet period elapsed."""


@dataclass(frozen=True)
class PageRequested:
    page: int


@dataclass(frozen=True)
class PageSizeChanged:
    page_size: int


@dataclass(frozen=True)
class ResultsLoaded:
    total_count: int


PageEvent = Union[SearchChanged, SearchSettled, PageRequested, PageSizeChanged, ResultsLoaded]
