from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    def list_for_team(self, team_id: int, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        player_id: int,
        team_id: int,
        event_date: date,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> int:
        """Insert a record; stores supporting it upsert on (player_id, team_id, event_date).

        Raises UpstreamWriteFailure when the store rejects the write.
        """

        raise NotImplementedError

    def update(self, *, attendance_id: int, status: AttendanceStatus, notes: Optional[str] = None) -> bool:
        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        team_id: Optional[int] = None,
        player_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[AttendanceStatus] = None,
        limit: int,
    ) -> Sequence[AttendanceReportRow]:
        """Newest first, at most ``limit`` rows, every given filter applied before the limit."""

        raise NotImplementedError
