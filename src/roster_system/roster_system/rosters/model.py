from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import ErrorCode
from ..players.model import Player


@dataclass(frozen=True)
class RosterEntry:
    """Time-bounded assignment of a player to a team.

    An entry without ``end_date`` is open; removal sets the end date instead of
    deleting the row.
    """

    entry_id: int
    player_id: int
    team_id: int
    start_date: date
    end_date: Optional[date] = None
    jersey_number: Optional[int] = None
    position: Optional[str] = None
    player: Optional[Player] = None

    def is_active(self, on: date) -> bool:
        return self.end_date is None or self.end_date > on


@dataclass(frozen=True)
class RosterCandidate:
    """A proposed add (``entry_id`` is None) or edit of a roster entry.

    ``jersey_number`` is kept raw (int or form string) so the validator can
    report malformed input instead of the caller crashing on ``int()``.
    """

    player_id: Optional[int]
    start_date: Optional[date]
    jersey_number: object = None
    position: Optional[str] = None
    entry_id: Optional[int] = None

    @property
    def is_new(self) -> bool:
        return self.entry_id is None


@dataclass(frozen=True)
class ValidationResult:
    errors: dict[str, ErrorCode] = field(default_factory=dict)
    jersey_number: Optional[int] = None

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class RosterReportRow:
    player_name: str
    jersey_number: Optional[int]
    position: Optional[str]
    status: str
    team_name: str
    start_date: date
    player_email: Optional[str] = None
    organization: Optional[str] = None
