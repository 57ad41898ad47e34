from __future__ import annotations

import logging
from datetime import date
from typing import Mapping

from ..core.exceptions import NotFoundError, ReconciliationAbort, UpstreamWriteFailure
from ..rosters.repository import RosterRepository
from ..teams.repository import TeamRepository
from .model import (
    AttendanceInput,
    AttendanceSheet,
    BatchResult,
    CreateOperation,
    WriteFailure,
    WriteOperation,
)
from .reconciler import reconcile
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: take attendance for a team on one event date."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        rosters: RosterRepository,
        teams: TeamRepository,
        *,
        skip_unchanged: bool = False,
    ):
        self._attendance = attendance
        self._rosters = rosters
        self._teams = teams
        self._skip_unchanged = bool(skip_unchanged)

    def _require_team(self, team_id: int) -> None:
        if not self._teams.get_by_id(int(team_id)):
            raise NotFoundError(f"Team {team_id} not found")

    def load_sheet(self, team_id: int, event_date: date) -> AttendanceSheet:
        """Roster plus stored records, with inputs prefilled from the records."""

        self._require_team(team_id)
        roster = list(self._rosters.list_active(int(team_id), on=event_date))
        records = list(self._attendance.list_for_team(int(team_id), start_date=event_date, end_date=event_date))
        inputs = {r.player_id: AttendanceInput(status=r.status, notes=r.notes or "") for r in records}
        return AttendanceSheet(team_id=int(team_id), event_date=event_date, roster=roster, records=records, inputs=inputs)

    def save(self, team_id: int, event_date: date, inputs: Mapping[int, AttendanceInput]) -> BatchResult:
        """Reconcile and write.

        Raises ReconciliationAbort, before any write, when a roster player has
        no status. Otherwise each operation is written on its own; failures
        are reported per player and succeeded writes are kept.
        """

        self._require_team(team_id)
        team_id = int(team_id)
        roster = self._rosters.list_active(team_id, on=event_date)
        existing = self._attendance.list_for_team(team_id, start_date=event_date, end_date=event_date)

        plan = reconcile(
            [e.player_id for e in roster],
            inputs,
            existing,
            team_id=team_id,
            event_date=event_date,
            skip_unchanged=self._skip_unchanged,
        )
        if not plan.ok:
            logger.info("Attendance for team %s on %s incomplete: %s", team_id, event_date, plan.validation_errors)
            raise ReconciliationAbort("Attendance status is required for every player", plan.validation_errors)

        succeeded: list[WriteOperation] = []
        failed: list[WriteFailure] = []
        for op in plan.operations:
            try:
                self._apply(op)
            except UpstreamWriteFailure as exc:
                logger.warning("Attendance write failed for player %s: %s", op.player_id, exc)
                failed.append(WriteFailure(operation=op, message=str(exc)))
                continue
            succeeded.append(op)

        created = sum(isinstance(op, CreateOperation) for op in succeeded)
        logger.info(
            "Saved attendance for team %s on %s: %d created, %d updated, %d failed",
            team_id,
            event_date,
            created,
            len(succeeded) - created,
            len(failed),
        )
        return BatchResult(succeeded=succeeded, failed=failed)

    def _apply(self, op: WriteOperation) -> None:
        if isinstance(op, CreateOperation):
            self._attendance.create(
                player_id=op.player_id,
                team_id=op.team_id,
                event_date=op.event_date,
                status=op.status,
                notes=op.notes,
            )
            return

        if not self._attendance.update(attendance_id=op.attendance_id, status=op.status, notes=op.notes):
            raise UpstreamWriteFailure(f"Attendance record {op.attendance_id} no longer exists", key=op.player_id)
