from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Union

from ..core.enums import AttendanceStatus, ErrorCode
from ..players.model import Player
from ..rosters.model import RosterEntry


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one player's attendance at one team event.

    (player_id, team_id, event_date) is unique; records are never deleted.
    """

    attendance_id: int
    player_id: int
    team_id: int
    event_date: date
    status: AttendanceStatus
    notes: Optional[str] = None
    player: Optional[Player] = None


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for reports/exports: record joined with player and team."""

    attendance_id: int
    event_date: date
    player_id: int
    first_name: str
    last_name: str
    team_id: int
    team_name: Optional[str]
    status: AttendanceStatus
    notes: Optional[str] = None

    @property
    def player_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def sort_name(self) -> str:
        return f"{self.last_name} {self.first_name}"


@dataclass(frozen=True)
class AttendanceInput:
    """Pending, not yet persisted status for one player."""

    status: Union[AttendanceStatus, str, None] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class CreateOperation:
    player_id: int
    team_id: int
    event_date: date
    status: AttendanceStatus
    notes: Optional[str] = None


@dataclass(frozen=True)
class UpdateOperation:
    attendance_id: int
    player_id: int
    status: AttendanceStatus
    notes: Optional[str] = None


WriteOperation = Union[CreateOperation, UpdateOperation]


@dataclass(frozen=True)
class ReconciliationPlan:
    to_create: list[CreateOperation] = field(default_factory=list)
    to_update: list[UpdateOperation] = field(default_factory=list)
    validation_errors: dict[int, ErrorCode] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.validation_errors

    @property
    def operations(self) -> list[WriteOperation]:
        return [*self.to_create, *self.to_update]


@dataclass(frozen=True)
class WriteFailure:
    operation: WriteOperation
    message: str

    @property
    def player_id(self) -> int:
        return self.operation.player_id


@dataclass(frozen=True)
class BatchResult:
    """Outcome of independently dispatched writes; not a transaction."""

    succeeded: list[WriteOperation] = field(default_factory=list)
    failed: list[WriteFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def failed_player_ids(self) -> list[int]:
        return [f.player_id for f in self.failed]


@dataclass(frozen=True)
class AttendanceSheet:
    team_id: int
    event_date: date
    roster: list[RosterEntry]
    records: list[AttendanceRecord]
    inputs: dict[int, AttendanceInput]


@dataclass(frozen=True)
class PlayerAttendanceStats:
    present: int = 0
    absent: int = 0
    excused: int = 0
    total: int = 0
    rate: float = 0.0


@dataclass(frozen=True)
class AttendanceStats:
    total_records: int = 0
    present_count: int = 0
    absent_count: int = 0
    excused_count: int = 0
    attendance_rate: float = 0.0
    player_stats: dict[int, PlayerAttendanceStats] = field(default_factory=dict)
