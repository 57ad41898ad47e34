from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute_write, query_all
from ..players.mysql_player_repository import row_to_player
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_team(self, team_id: int, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        rows = query_all(
            self._conn_factory,
            """
            SELECT
                ar.attendance_id, ar.player_id, ar.team_id, ar.event_date, ar.status, ar.notes,
                p.player_id AS p_player_id, p.first_name AS p_first_name, p.last_name AS p_last_name,
                p.organization AS p_organization
            FROM attendance_records ar
            JOIN players p ON p.player_id = ar.player_id
            WHERE ar.team_id=%s AND ar.event_date BETWEEN %s AND %s
            ORDER BY ar.event_date ASC, p.last_name ASC, p.first_name ASC
            """,
            (int(team_id), start_date, end_date),
        )
        return [
            AttendanceRecord(
                attendance_id=int(r["attendance_id"]),
                player_id=int(r["player_id"]),
                team_id=int(r["team_id"]),
                event_date=r["event_date"],
                status=AttendanceStatus(r["status"]),
                notes=r.get("notes"),
                player=row_to_player(r, prefix="p_"),
            )
            for r in rows
        ]

    def create(
        self,
        *,
        player_id: int,
        team_id: int,
        event_date: date,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> int:
        # A retried or raced create lands on the existing row.
        attendance_id, _ = execute_write(
            self._conn_factory,
            """
            INSERT INTO attendance_records(player_id, team_id, event_date, status, notes)
            VALUES(%s,%s,%s,%s,%s)
            ON DUPLICATE KEY UPDATE
                status=VALUES(status),
                notes=VALUES(notes),
                attendance_id=LAST_INSERT_ID(attendance_id)
            """,
            (int(player_id), int(team_id), event_date, AttendanceStatus(status).value, notes),
            failure=f"Failed to record attendance for player {player_id}",
            key=player_id,
        )
        return attendance_id

    def update(self, *, attendance_id: int, status: AttendanceStatus, notes: Optional[str] = None) -> bool:
        _, affected = execute_write(
            self._conn_factory,
            "UPDATE attendance_records SET status=%s, notes=%s WHERE attendance_id=%s",
            (AttendanceStatus(status).value, notes, int(attendance_id)),
            failure=f"Failed to update attendance {attendance_id}",
            key=attendance_id,
        )
        return affected > 0

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
        clauses: list[str] = []
        params: list[object] = []

        if team_id is not None:
            clauses.append("ar.team_id=%s")
            params.append(int(team_id))
        if player_id is not None:
            clauses.append("ar.player_id=%s")
            params.append(int(player_id))
        if start_date is not None:
            clauses.append("ar.event_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("ar.event_date <= %s")
            params.append(end_date)
        if status is not None:
            clauses.append("ar.status=%s")
            params.append(AttendanceStatus(status).value)

        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        params.append(int(limit))

        rows = query_all(
            self._conn_factory,
            f"""
            SELECT
                ar.attendance_id, ar.event_date, ar.player_id, p.first_name, p.last_name,
                ar.team_id, t.name AS team_name, ar.status, ar.notes
            FROM attendance_records ar
            JOIN players p ON p.player_id = ar.player_id
            LEFT JOIN teams t ON t.team_id = ar.team_id
            {where}
            ORDER BY ar.event_date DESC, ar.attendance_id ASC
            LIMIT %s
            """,
            params,
        )
        return [
            AttendanceReportRow(
                attendance_id=int(r["attendance_id"]),
                event_date=r["event_date"],
                player_id=int(r["player_id"]),
                first_name=r["first_name"],
                last_name=r["last_name"],
                team_id=int(r["team_id"]),
                team_name=r.get("team_name"),
                status=AttendanceStatus(r["status"]),
                notes=r.get("notes"),
            )
            for r in rows
        ]
