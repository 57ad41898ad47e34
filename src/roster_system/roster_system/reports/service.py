from __future__ import annotations

import logging
from typing import Optional

from ..attendance.aggregator import aggregate
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import today_local
from ..core.constants import REPORT_FETCH_LIMIT
from ..core.enums import SortDirection, SortField
from ..core.exceptions import NotFoundError
from ..rosters.model import RosterReportRow
from ..rosters.repository import RosterRepository
from ..teams.repository import TeamRepository
from .engine import ATTENDANCE_EXPORT_COLUMNS, ROSTER_EXPORT_COLUMNS, filter_records, sort_records, to_csv
from .model import AttendanceReport, FilterState

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        rosters: RosterRepository,
        teams: TeamRepository,
        *,
        fetch_limit: int = REPORT_FETCH_LIMIT,
    ):
        self._attendance = attendance
        self._rosters = rosters
        self._teams = teams
        self._fetch_limit = int(fetch_limit)

    def build_attendance_report(
        self,
        filters: Optional[FilterState] = None,
        *,
        sort_field: SortField = SortField.EVENT_DATE,
        direction: SortDirection = SortDirection.DESC,
    ) -> AttendanceReport:
        filters = filters or FilterState()
        fetched = self._attendance.get_report_rows(
            team_id=filters.team_id,
            player_id=filters.player_id,
            start_date=filters.start_date,
            end_date=filters.end_date,
            status=filters.status,
            limit=self._fetch_limit,
        )
        if len(fetched) >= self._fetch_limit:
            logger.warning("Attendance report hit the fetch limit of %d rows", self._fetch_limit)

        # Filters are applied by the store before the fetch limit; this pass re-checks them.
        rows = filter_records(fetched, filters)
        return AttendanceReport(
            rows=sort_records(rows, sort_field, direction),
            stats=aggregate(rows),
            filters=filters,
            sort_field=SortField(sort_field),
            direction=SortDirection(direction),
        )

    def export_attendance_csv(
        self,
        filters: Optional[FilterState] = None,
        *,
        sort_field: SortField = SortField.EVENT_DATE,
        direction: SortDirection = SortDirection.DESC,
    ) -> str:
        report = self.build_attendance_report(filters, sort_field=sort_field, direction=direction)
        return to_csv(report.rows, ATTENDANCE_EXPORT_COLUMNS)

    def build_roster_report(self, team_id: int) -> list[RosterReportRow]:
        team = self._teams.get_by_id(int(team_id))
        if not team:
            raise NotFoundError(f"Team {team_id} not found")

        today = today_local()
        rows = []
        for entry in self._rosters.list_for_team(team.team_id):
            player = entry.player
            rows.append(
                RosterReportRow(
                    player_name=player.full_name if player else str(entry.player_id),
                    jersey_number=entry.jersey_number,
                    position=entry.position,
                    status="active" if entry.is_active(today) else "inactive",
                    team_name=team.name,
                    start_date=entry.start_date,
                    player_email=player.email if player else None,
                    organization=player.organization if player else team.organization,
                )
            )
        return rows

    def export_roster_csv(self, team_id: int) -> str:
        return to_csv(self.build_roster_report(team_id), ROSTER_EXPORT_COLUMNS)
