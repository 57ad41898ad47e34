from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from src.roster_system.roster_system.attendance.model import AttendanceInput, AttendanceRecord
from src.roster_system.roster_system.attendance.service import AttendanceService
from src.roster_system.roster_system.core.enums import AttendanceStatus, ErrorCode
from src.roster_system.roster_system.core.exceptions import NotFoundError, ReconciliationAbort, UpstreamWriteFailure
from src.roster_system.roster_system.rosters.model import RosterEntry
from src.roster_system.roster_system.teams.model import Team

EVENT = date(2024, 3, 1)


class FakeTeamsRepo:
    def get_by_id(self, team_id):
        return Team(team_id=10, name="U12 Hawks", organization="Northside FC") if int(team_id) == 10 else None

    def list_all(self):
        return [self.get_by_id(10)]


class FakeRosterRepo:
    def __init__(self, entries):
        self._entries = list(entries)

    def list_active(self, team_id, *, on):
        return [e for e in self._entries if e.team_id == team_id and e.is_active(on)]


class FakeAttendanceRepo:
    def __init__(self, *, fail_for=()):
        self.records: dict[int, AttendanceRecord] = {}
        self.fail_for = set(fail_for)
        self.calls: list[str] = []
        self._next_id = 1

    def _find(self, player_id, team_id, event_date):
        for r in self.records.values():
            if (r.player_id, r.team_id, r.event_date) == (player_id, team_id, event_date):
                return r
        return None

    def list_for_team(self, team_id, *, start_date, end_date):
        return [r for r in self.records.values() if r.team_id == team_id and start_date <= r.event_date <= end_date]

    def create(self, *, player_id, team_id, event_date, status, notes=None):
        self.calls.append("create")
        if player_id in self.fail_for:
            raise UpstreamWriteFailure("connection reset", key=player_id)
        found = self._find(player_id, team_id, event_date)
        if found:
            self.records[found.attendance_id] = replace(found, status=status, notes=notes)
            return found.attendance_id
        aid = self._next_id
        self._next_id += 1
        self.records[aid] = AttendanceRecord(
            attendance_id=aid, player_id=player_id, team_id=team_id, event_date=event_date, status=status, notes=notes
        )
        return aid

    def update(self, *, attendance_id, status, notes=None):
        self.calls.append("update")
        record = self.records.get(attendance_id)
        if not record:
            return False
        if record.player_id in self.fail_for:
            raise UpstreamWriteFailure("connection reset", key=record.player_id)
        self.records[attendance_id] = replace(record, status=status, notes=notes)
        return True


def _roster(*player_ids):
    return [
        RosterEntry(entry_id=i + 1, player_id=pid, team_id=10, start_date=date(2024, 1, 1))
        for i, pid in enumerate(player_ids)
    ]


def _service(attendance, roster=None):
    return AttendanceService(attendance, FakeRosterRepo(roster or _roster(1, 2, 3)), FakeTeamsRepo())


def test_save_creates_one_record_per_roster_player():
    repo = FakeAttendanceRepo()
    inputs = {1: AttendanceInput("Present"), 2: AttendanceInput("Absent", "flu"), 3: AttendanceInput("Excused")}

    result = _service(repo).save(10, EVENT, inputs)

    assert result.ok
    assert len(result.succeeded) == 3
    by_player = {r.player_id: r for r in repo.records.values()}
    assert by_player[2].status == AttendanceStatus.ABSENT
    assert by_player[2].notes == "flu"


def test_missing_status_aborts_before_any_write():
    repo = FakeAttendanceRepo()
    inputs = {1: AttendanceInput("Present"), 2: AttendanceInput("Absent")}

    with pytest.raises(ReconciliationAbort) as exc:
        _service(repo).save(10, EVENT, inputs)

    assert exc.value.errors == {3: ErrorCode.MISSING_STATUS}
    assert repo.calls == []
    assert repo.records == {}


def test_saving_twice_updates_instead_of_duplicating():
    repo = FakeAttendanceRepo()
    svc = _service(repo)
    inputs = {pid: AttendanceInput("Present") for pid in (1, 2, 3)}

    svc.save(10, EVENT, inputs)
    inputs[2] = AttendanceInput("Absent")
    svc.save(10, EVENT, inputs)

    assert len(repo.records) == 3
    assert repo.calls == ["create"] * 3 + ["update"] * 3
    assert {r.player_id: r.status for r in repo.records.values()}[2] == AttendanceStatus.ABSENT


def test_partial_failure_keeps_successful_writes():
    repo = FakeAttendanceRepo(fail_for={2})
    svc = _service(repo)
    inputs = {pid: AttendanceInput("Present") for pid in (1, 2, 3)}

    result = svc.save(10, EVENT, inputs)

    assert not result.ok
    assert result.failed_player_ids == [2]
    assert sorted(op.player_id for op in result.succeeded) == [1, 3]
    assert sorted(r.player_id for r in repo.records.values()) == [1, 3]

    repo.fail_for.clear()
    retry = svc.save(10, EVENT, inputs)
    assert retry.ok
    assert len(repo.records) == 3


def test_players_removed_before_event_date_are_not_expected():
    roster = _roster(1, 2)
    roster[1] = replace(roster[1], end_date=EVENT)
    repo = FakeAttendanceRepo()

    result = _service(repo, roster).save(10, EVENT, {1: AttendanceInput("Present")})

    assert result.ok
    assert [op.player_id for op in result.succeeded] == [1]


def test_load_sheet_prefills_inputs_from_records():
    repo = FakeAttendanceRepo()
    svc = _service(repo)
    svc.save(10, EVENT, {1: AttendanceInput("Present"), 2: AttendanceInput("Absent", "late bus"), 3: AttendanceInput("Excused")})

    sheet = svc.load_sheet(10, EVENT)

    assert [e.player_id for e in sheet.roster] == [1, 2, 3]
    assert sheet.inputs[2] == AttendanceInput(status=AttendanceStatus.ABSENT, notes="late bus")
    assert sheet.inputs[1].notes == ""


def test_unknown_team():
    with pytest.raises(NotFoundError):
        _service(FakeAttendanceRepo()).save(99, EVENT, {})
