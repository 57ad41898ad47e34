from __future__ import annotations

import csv
import io
from datetime import date

from src.roster_system.roster_system.attendance.model import AttendanceReportRow
from src.roster_system.roster_system.core.enums import AttendanceStatus, SortDirection, SortField
from src.roster_system.roster_system.reports.engine import (
    ATTENDANCE_EXPORT_COLUMNS,
    filter_records,
    next_sort,
    sort_records,
    to_csv,
)
from src.roster_system.roster_system.reports.model import FilterState


def _row(aid, day, player_id, first, last, team_id, team_name, status, notes=None):
    return AttendanceReportRow(
        attendance_id=aid,
        event_date=date(2024, 3, day),
        player_id=player_id,
        first_name=first,
        last_name=last,
        team_id=team_id,
        team_name=team_name,
        status=status,
        notes=notes,
    )


ROWS = [
    _row(1, 1, 100, "Ana", "Silva", 10, "Hawks", AttendanceStatus.PRESENT),
    _row(2, 1, 101, "Ben", "Adams", 10, "Hawks", AttendanceStatus.ABSENT),
    _row(3, 2, 100, "Ana", "Silva", 10, "Hawks", AttendanceStatus.EXCUSED),
    _row(4, 2, 200, "Cy", "Moore", 20, "Owls", AttendanceStatus.PRESENT),
    _row(5, 5, 101, "Ben", "Adams", 10, "Hawks", AttendanceStatus.PRESENT),
]


def test_empty_filter_keeps_everything():
    assert filter_records(ROWS, FilterState()) == ROWS


def test_filters_are_a_conjunction():
    filters = FilterState(team_id=10, start_date=date(2024, 3, 1), end_date=date(2024, 3, 2), status=AttendanceStatus.PRESENT)

    assert [r.attendance_id for r in filter_records(ROWS, filters)] == [1]


def test_date_bounds_are_inclusive():
    filters = FilterState(start_date=date(2024, 3, 2), end_date=date(2024, 3, 5))

    assert [r.attendance_id for r in filter_records(ROWS, filters)] == [3, 4, 5]


def test_filter_does_not_mutate_input():
    before = list(ROWS)
    filter_records(ROWS, FilterState(player_id=100))
    assert ROWS == before


def test_sort_by_date_is_stable_both_ways():
    asc = sort_records(ROWS, SortField.EVENT_DATE, SortDirection.ASC)
    desc = sort_records(ROWS, SortField.EVENT_DATE, SortDirection.DESC)

    assert [r.attendance_id for r in asc] == [1, 2, 3, 4, 5]
    assert [r.attendance_id for r in desc] == [5, 3, 4, 1, 2]


def test_sort_by_player_name_uses_surname():
    ordered = sort_records(ROWS, SortField.PLAYER_NAME)

    assert [r.last_name for r in ordered] == ["Adams", "Adams", "Moore", "Silva", "Silva"]
    assert [r.attendance_id for r in ordered] == [2, 5, 4, 1, 3]


def test_sort_by_status_and_team():
    assert [r.status.value for r in sort_records(ROWS, SortField.STATUS)] == [
        "Absent",
        "Excused",
        "Present",
        "Present",
        "Present",
    ]
    assert [r.team_name for r in sort_records(ROWS, SortField.TEAM_NAME, SortDirection.DESC)][0] == "Owls"


def test_next_sort_toggles_same_column_and_resets_new_one():
    assert next_sort(SortField.EVENT_DATE, SortDirection.DESC, SortField.EVENT_DATE) == (
        SortField.EVENT_DATE,
        SortDirection.ASC,
    )
    assert next_sort(SortField.EVENT_DATE, SortDirection.ASC, SortField.EVENT_DATE) == (
        SortField.EVENT_DATE,
        SortDirection.DESC,
    )
    assert next_sort(SortField.EVENT_DATE, SortDirection.DESC, SortField.STATUS) == (
        SortField.STATUS,
        SortDirection.ASC,
    )


def test_csv_export_survives_commas_quotes_and_newlines():
    rows = [
        _row(1, 1, 100, "Ana", "Silva", 10, "Hawks, Blue", AttendanceStatus.ABSENT, 'said "sick",\nback Monday'),
        _row(2, 2, 101, "Ben", "Adams", 10, None, AttendanceStatus.PRESENT),
    ]

    text = to_csv(rows, ATTENDANCE_EXPORT_COLUMNS)
    parsed = list(csv.reader(io.StringIO(text, newline="")))

    assert parsed[0] == ["Date", "Player Name", "Status", "Notes", "Team"]
    assert parsed[1] == ["2024-03-01", "Ana Silva", "Absent", 'said "sick",\nback Monday', "Hawks, Blue"]
    assert parsed[2] == ["2024-03-02", "Ben Adams", "Present", "", ""]
    assert len(parsed) == 3


def test_csv_export_of_no_rows_is_header_only():
    assert to_csv([], ATTENDANCE_EXPORT_COLUMNS) == '"Date","Player Name","Status","Notes","Team"\n'
