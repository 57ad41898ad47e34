from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Player


class PlayerRepository(Protocol):
    def get_by_id(self, player_id: int) -> Optional[Player]:
        raise NotImplementedError

    def list_for_organization(self, organization: str, *, limit: int) -> Sequence[Player]:
        """All players of an organization, ordered by last then first name."""

        raise NotImplementedError

    def search(self, *, text: str, offset: int, limit: int) -> tuple[Sequence[Player], int]:
        """One page of players matching ``text`` plus the total match count."""

        raise NotImplementedError
