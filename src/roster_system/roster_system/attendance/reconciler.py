"""Attendance reconciliation.

Turns the statuses entered for a team's roster on one event date into the
create/update operations needed to persist them. Records are upserted by
(player_id, team_id, event_date), so running the same inputs again against the
refreshed records never produces a second create for a player.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional

from ..common.validators import blank_to_none
from ..core.enums import AttendanceStatus, ErrorCode
from .model import (
    AttendanceInput,
    AttendanceRecord,
    CreateOperation,
    ReconciliationPlan,
    UpdateOperation,
)


def coerce_status(value: object) -> Optional[AttendanceStatus]:
    """None for a blank status; ValueError for an unknown one."""

    if value is None:
        return None
    if isinstance(value, AttendanceStatus):
        return value
    text = str(value).strip()
    if not text:
        return None
    for status in AttendanceStatus:
        if status.value.lower() == text.lower():
            return status
    raise ValueError(f"Unknown attendance status: {value!r}")


def reconcile(
    roster_player_ids: Iterable[int],
    inputs: Mapping[int, AttendanceInput],
    existing_records: Iterable[AttendanceRecord],
    *,
    team_id: int,
    event_date: date,
    skip_unchanged: bool = False,
) -> ReconciliationPlan:
    """Plan the writes for one team and date.

    Every roster player needs a status; if any is missing or unknown the plan
    carries the errors and no operations. By default an existing record is
    always updated; ``skip_unchanged`` drops updates that would not change it.
    """

    player_ids = list(dict.fromkeys(int(pid) for pid in roster_player_ids))

    errors: dict[int, ErrorCode] = {}
    resolved: dict[int, tuple[AttendanceStatus, Optional[str]]] = {}
    for pid in player_ids:
        entry = inputs.get(pid)
        try:
            status = coerce_status(entry.status) if entry else None
        except ValueError:
            errors[pid] = ErrorCode.INVALID_STATUS
            continue
        if status is None:
            errors[pid] = ErrorCode.MISSING_STATUS
            continue
        resolved[pid] = (status, blank_to_none(entry.notes))

    if errors:
        return ReconciliationPlan(validation_errors=errors)

    existing: dict[int, AttendanceRecord] = {}
    for record in existing_records:
        if record.team_id == team_id and record.event_date == event_date:
            existing.setdefault(record.player_id, record)

    to_create: list[CreateOperation] = []
    to_update: list[UpdateOperation] = []
    for pid in player_ids:
        status, notes = resolved[pid]
        record = existing.get(pid)
        if record is None:
            to_create.append(
                CreateOperation(player_id=pid, team_id=team_id, event_date=event_date, status=status, notes=notes)
            )
            continue
        if skip_unchanged and record.status == status and blank_to_none(record.notes) == notes:
            continue
        to_update.append(
            UpdateOperation(attendance_id=record.attendance_id, player_id=pid, status=status, notes=notes)
        )

    return ReconciliationPlan(to_create=to_create, to_update=to_update)
