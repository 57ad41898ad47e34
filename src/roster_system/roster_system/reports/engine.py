"""Report filtering, sorting and CSV export.

All functions are pure: they never mutate their input and keep no state
between calls. Sorting is stable in both directions, so rows with equal keys
keep the order they were supplied in.
"""

from __future__ import annotations

import csv
import io
from datetime import date
from enum import Enum
from typing import Callable, Iterable, Sequence, TypeVar

from ..attendance.model import AttendanceReportRow
from ..core.enums import AttendanceStatus, SortDirection, SortField
from .model import ColumnSpec, FilterState

R = TypeVar("R")


def matches(record: AttendanceReportRow, filters: FilterState) -> bool:
    if filters.team_id is not None and record.team_id != filters.team_id:
        return False
    if filters.player_id is not None and record.player_id != filters.player_id:
        return False
    if filters.start_date is not None and record.event_date < filters.start_date:
        return False
    if filters.end_date is not None and record.event_date > filters.end_date:
        return False
    if filters.status is not None and AttendanceStatus(record.status) != filters.status:
        return False
    return True


def filter_records(records: Iterable[AttendanceReportRow], filters: FilterState) -> list[AttendanceReportRow]:
    return [r for r in records if matches(r, filters)]


_SORT_KEYS: dict[SortField, Callable[[AttendanceReportRow], object]] = {
    SortField.EVENT_DATE: lambda r: r.event_date,
    SortField.PLAYER_NAME: lambda r: r.sort_name,
    SortField.STATUS: lambda r: AttendanceStatus(r.status).value,
    SortField.TEAM_NAME: lambda r: r.team_name or "",
}


def sort_records(
    records: Iterable[AttendanceReportRow],
    field: SortField,
    direction: SortDirection = SortDirection.ASC,
) -> list[AttendanceReportRow]:
    key = _SORT_KEYS[SortField(field)]
    return sorted(records, key=key, reverse=SortDirection(direction) == SortDirection.DESC)


def next_sort(
    current_field: SortField,
    current_direction: SortDirection,
    clicked: SortField,
) -> tuple[SortField, SortDirection]:
    """Column-header click: same column flips direction, a new one sorts ascending."""

    if clicked == current_field:
        flipped = SortDirection.DESC if current_direction == SortDirection.ASC else SortDirection.ASC
        return current_field, flipped
    return clicked, SortDirection.ASC


def _cell(value: object) -> object:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    return value


def to_csv(records: Iterable[R], columns: Sequence[ColumnSpec]) -> str:
    """Header row, then one row per record in the order given.

    Every text cell is quoted and embedded quotes are doubled, so names and
    notes containing commas, quotes or newlines parse back unchanged.
    """

    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    writer.writerow([c.header for c in columns])
    for record in records:
        writer.writerow([_cell(c.value(record)) for c in columns])
    return out.getvalue()


ATTENDANCE_EXPORT_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("Date", lambda r: r.event_date),
    ColumnSpec("Player Name", lambda r: r.player_name),
    ColumnSpec("Status", lambda r: r.status),
    ColumnSpec("Notes", lambda r: r.notes),
    ColumnSpec("Team", lambda r: r.team_name),
)


ROSTER_EXPORT_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("Player Name", lambda r: r.player_name),
    ColumnSpec("Jersey Number", lambda r: r.jersey_number),
    ColumnSpec("Position", lambda r: r.position),
    ColumnSpec("Status", lambda r: r.status),
    ColumnSpec("Team", lambda r: r.team_name),
    ColumnSpec("Start Date", lambda r: r.start_date),
    ColumnSpec("Email", lambda r: r.player_email),
    ColumnSpec("Organization", lambda r: r.organization),
)
