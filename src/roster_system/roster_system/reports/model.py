from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Mapping, Optional

from ..attendance.model import AttendanceReportRow, AttendanceStats
from ..attendance.reconciler import coerce_status
from ..common.datetime_utils import parse_optional_date
from ..common.validators import optional_int
from ..core.enums import AttendanceStatus, SortDirection, SortField


@dataclass(frozen=True)
class FilterState:
    """Report query descriptor. Every field is optional; None means no constraint."""

    team_id: Optional[int] = None
    player_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[AttendanceStatus] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "FilterState":
        """Build from query-string style arguments; blank values are ignored."""

        return cls(
            team_id=optional_int(args.get("team_id")),
            player_id=optional_int(args.get("player_id")),
            start_date=parse_optional_date(args.get("start_date")),
            end_date=parse_optional_date(args.get("end_date")),
            status=coerce_status(args.get("status")),
        )


@dataclass(frozen=True)
class ColumnSpec:
    header: str
    value: Callable[[Any], object]


@dataclass(frozen=True)
class AttendanceReport:
    rows: list[AttendanceReportRow]
    stats: AttendanceStats
    filters: FilterState
    sort_field: SortField
    direction: SortDirection
