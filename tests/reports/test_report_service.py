from __future__ import annotations

import csv
import io
from datetime import date, timedelta

import pytest

from src.roster_system.roster_system.attendance.model import AttendanceReportRow
from src.roster_system.roster_system.common.datetime_utils import today_local
from src.roster_system.roster_system.core.enums import AttendanceStatus, SortDirection, SortField
from src.roster_system.roster_system.core.exceptions import NotFoundError
from src.roster_system.roster_system.players.model import Player
from src.roster_system.roster_system.reports.model import FilterState
from src.roster_system.roster_system.reports.service import ReportService
from src.roster_system.roster_system.rosters.model import RosterEntry
from src.roster_system.roster_system.teams.model import Team


class FakeAttendanceRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_query = None

    def get_report_rows(self, *, team_id=None, player_id=None, start_date=None, end_date=None, status=None, limit):
        self.last_query = dict(
            team_id=team_id, player_id=player_id, start_date=start_date, end_date=end_date, status=status, limit=limit
        )
        rows = [
            r
            for r in self._rows
            if (team_id is None or r.team_id == team_id) and (status is None or r.status == status)
        ]
        return sorted(rows, key=lambda r: r.event_date, reverse=True)[:limit]


class FakeRosterRepo:
    def __init__(self, entries):
        self._entries = entries

    def list_for_team(self, team_id):
        return [e for e in self._entries if e.team_id == team_id]


class FakeTeamsRepo:
    def get_by_id(self, team_id):
        return Team(team_id=10, name="Hawks", organization="Northside FC") if int(team_id) == 10 else None


def _row(aid, day, player_id, last, status, notes=None):
    return AttendanceReportRow(
        attendance_id=aid,
        event_date=date(2024, 3, day),
        player_id=player_id,
        first_name="P",
        last_name=last,
        team_id=10,
        team_name="Hawks",
        status=status,
        notes=notes,
    )


ROWS = [
    _row(1, 1, 100, "Silva", AttendanceStatus.PRESENT),
    _row(2, 1, 101, "Adams", AttendanceStatus.ABSENT),
    _row(3, 8, 100, "Silva", AttendanceStatus.PRESENT),
    _row(4, 8, 101, "Adams", AttendanceStatus.PRESENT),
]


def _service(rows=ROWS, entries=(), fetch_limit=1000):
    attendance = FakeAttendanceRepo(list(rows))
    svc = ReportService(attendance, FakeRosterRepo(list(entries)), FakeTeamsRepo(), fetch_limit=fetch_limit)
    return svc, attendance


def test_default_report_is_newest_first_with_stats():
    svc, attendance = _service()

    report = svc.build_attendance_report()

    assert report.sort_field == SortField.EVENT_DATE
    assert report.direction == SortDirection.DESC
    assert [r.event_date.day for r in report.rows] == [8, 8, 1, 1]
    assert report.stats.total_records == 4
    assert report.stats.attendance_rate == pytest.approx(75.0)
    assert attendance.last_query["limit"] == 1000


def test_status_filter_applies_to_rows_and_stats():
    svc, attendance = _service()

    report = svc.build_attendance_report(FilterState(team_id=10, status=AttendanceStatus.ABSENT))

    assert [r.attendance_id for r in report.rows] == [2]
    assert report.stats.total_records == 1
    assert report.stats.attendance_rate == 0.0
    assert attendance.last_query["team_id"] == 10


def test_status_filter_is_applied_before_the_fetch_limit():
    rows = [
        _row(1, 1, 100, "Silva", AttendanceStatus.EXCUSED),
        _row(2, 8, 100, "Silva", AttendanceStatus.PRESENT),
        _row(3, 9, 101, "Adams", AttendanceStatus.PRESENT),
    ]
    svc, attendance = _service(rows, fetch_limit=2)

    report = svc.build_attendance_report(FilterState(status=AttendanceStatus.EXCUSED))

    assert [r.attendance_id for r in report.rows] == [1]
    assert report.stats.excused_count == 1
    assert attendance.last_query["status"] == AttendanceStatus.EXCUSED


def test_report_sorted_by_player_name():
    svc, _ = _service()

    report = svc.build_attendance_report(sort_field=SortField.PLAYER_NAME, direction=SortDirection.ASC)

    assert [r.last_name for r in report.rows] == ["Adams", "Adams", "Silva", "Silva"]


def test_attendance_csv_has_header_and_one_line_per_row():
    svc, _ = _service()

    parsed = list(csv.reader(io.StringIO(svc.export_attendance_csv(FilterState(player_id=100)), newline="")))

    assert parsed[0] == ["Date", "Player Name", "Status", "Notes", "Team"]
    assert parsed[1:] == [
        ["2024-03-08", "P Silva", "Present", "", "Hawks"],
        ["2024-03-01", "P Silva", "Present", "", "Hawks"],
    ]


def test_roster_report_marks_ended_entries_inactive():
    player = Player(player_id=1, first_name="Ana", last_name="Silva", organization="Northside FC", email="ana@example.org")
    entries = [
        RosterEntry(entry_id=1, player_id=1, team_id=10, start_date=date(2024, 1, 1), jersey_number=9, position="GK", player=player),
        RosterEntry(
            entry_id=2,
            player_id=2,
            team_id=10,
            start_date=date(2023, 1, 1),
            end_date=today_local() - timedelta(days=30),
        ),
    ]
    svc, _ = _service(entries=entries)

    rows = svc.build_roster_report(10)

    assert [(r.player_name, r.status) for r in rows] == [("Ana Silva", "active"), ("2", "inactive")]
    assert rows[0].player_email == "ana@example.org"
    assert rows[1].organization == "Northside FC"

    parsed = list(csv.reader(io.StringIO(svc.export_roster_csv(10), newline="")))
    assert parsed[0] == [
        "Player Name",
        "Jersey Number",
        "Position",
        "Status",
        "Team",
        "Start Date",
        "Email",
        "Organization",
    ]
    assert parsed[1] == ["Ana Silva", "9", "GK", "active", "Hawks", "2024-01-01", "ana@example.org", "Northside FC"]


def test_roster_report_unknown_team():
    svc, _ = _service()

    with pytest.raises(NotFoundError):
        svc.build_roster_report(99)
