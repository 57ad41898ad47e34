from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import optional_text
from ..core.constants import PLAYER_POOL_LIMIT
from ..core.enums import ErrorCode
from ..core.exceptions import NotFoundError, ValidationError
from ..players.model import Player
from ..players.repository import PlayerRepository
from ..teams.model import Team
from ..teams.repository import TeamRepository
from .model import RosterCandidate, RosterEntry
from .repository import RosterRepository
from .validator import assignable_players, validate_roster_entry

logger = logging.getLogger(__name__)


class RosterService:
    """Use cases: assign players to a team, edit and remove roster entries.

    Every write re-reads the active roster and validates against it, so the
    one-open-entry-per-player and unique-jersey rules hold at write time and
    not only when the assignable pool was computed.
    """

    def __init__(self, rosters: RosterRepository, teams: TeamRepository, players: PlayerRepository):
        self._rosters = rosters
        self._teams = teams
        self._players = players

    def _require_team(self, team_id: int) -> Team:
        team = self._teams.get_by_id(int(team_id))
        if not team:
            raise NotFoundError(f"Team {team_id} not found")
        return team

    def _require_entry(self, entry_id: int) -> RosterEntry:
        entry = self._rosters.get_by_id(int(entry_id))
        if not entry:
            raise NotFoundError(f"Roster entry {entry_id} not found")
        return entry

    def list_active(self, team_id: int, *, on: Optional[date] = None) -> Sequence[RosterEntry]:
        self._require_team(team_id)
        return self._rosters.list_active(int(team_id), on=on or today_local())

    def list_entries(self, team_id: int) -> Sequence[RosterEntry]:
        self._require_team(team_id)
        return self._rosters.list_for_team(int(team_id))

    def available_players(self, team_id: int) -> list[Player]:
        team = self._require_team(team_id)
        pool = self._players.list_for_organization(team.organization, limit=PLAYER_POOL_LIMIT)
        active = self._rosters.list_active(team.team_id, on=today_local())
        return assignable_players(pool, active)

    def add_player(self, team_id: int, candidate: RosterCandidate) -> int:
        if not candidate.is_new:
            raise ValueError("add_player expects a candidate without entry_id")

        team = self._require_team(team_id)
        today = today_local()
        active = self._rosters.list_active(team.team_id, on=today)

        result = validate_roster_entry(candidate, active, as_of=today)
        if not result.ok:
            logger.info("Rejected roster add for team %s: %s", team.team_id, result.errors)
            raise ValidationError("Roster entry is invalid", result.errors)

        entry_id = self._rosters.create(
            team_id=team.team_id,
            player_id=int(candidate.player_id),
            start_date=candidate.start_date,
            jersey_number=result.jersey_number,
            position=optional_text(candidate.position),
        )
        logger.info("Added player %s to team %s (entry %s)", candidate.player_id, team.team_id, entry_id)
        return entry_id

    def edit_entry(self, entry_id: int, *, jersey_number: object = None, position: Optional[str] = None) -> None:
        """Change jersey number and position only; player and team are fixed."""

        entry = self._require_entry(entry_id)
        today = today_local()
        if not entry.is_active(today):
            raise ValidationError("Roster entry has ended", {"entry_id": ErrorCode.ENTRY_ALREADY_ENDED})

        candidate = RosterCandidate(
            player_id=entry.player_id,
            start_date=entry.start_date,
            jersey_number=jersey_number,
            position=position,
            entry_id=entry.entry_id,
        )
        active = self._rosters.list_active(entry.team_id, on=today)
        result = validate_roster_entry(candidate, active, as_of=today)
        if not result.ok:
            logger.info("Rejected roster edit for entry %s: %s", entry.entry_id, result.errors)
            raise ValidationError("Roster entry is invalid", result.errors)

        if not self._rosters.update(
            entry_id=entry.entry_id,
            jersey_number=result.jersey_number,
            position=optional_text(position),
        ):
            raise NotFoundError(f"Roster entry {entry_id} not found")

    def remove_player(self, entry_id: int, *, on: Optional[date] = None) -> None:
        """Soft delete: the entry stays for history with an end date."""

        entry = self._require_entry(entry_id)
        on = on or today_local()
        if not entry.is_active(on):
            raise ValidationError("Roster entry has already ended", {"entry_id": ErrorCode.ENTRY_ALREADY_ENDED})

        if not self._rosters.end(entry_id=entry.entry_id, end_date=on):
            raise ValidationError("Roster entry has already ended", {"entry_id": ErrorCode.ENTRY_ALREADY_ENDED})
        logger.info("Removed player %s from team %s as of %s", entry.player_id, entry.team_id, on)
