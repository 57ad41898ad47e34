from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import RosterEntry


class RosterRepository(Protocol):
    def get_by_id(self, entry_id: int) -> Optional[RosterEntry]:
        raise NotImplementedError

    def list_active(self, team_id: int, *, on: date) -> Sequence[RosterEntry]:
        """Entries open on ``on`` (no end date, or ending after it), with players."""

        raise NotImplementedError

    def list_for_team(self, team_id: int) -> Sequence[RosterEntry]:
        """Every entry of the team, ended ones included."""

        raise NotImplementedError

    def create(
        self,
        *,
        team_id: int,
        player_id: int,
        start_date: date,
        jersey_number: Optional[int],
        position: Optional[str],
    ) -> int:
        raise NotImplementedError

    def update(self, *, entry_id: int, jersey_number: Optional[int], position: Optional[str]) -> bool:
        raise NotImplementedError

    def end(self, *, entry_id: int, end_date: date) -> bool:
        """Soft delete: close the entry on ``end_date``."""

        raise NotImplementedError
