from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import ErrorCode
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute_write, query_all, query_one
from ..players.mysql_player_repository import row_to_player
from .model import RosterEntry
from .repository import RosterRepository

_SELECT = """
    SELECT
        re.entry_id, re.player_id, re.team_id, re.start_date, re.end_date,
        re.jersey_number, re.position,
        p.player_id AS p_player_id, p.first_name AS p_first_name, p.last_name AS p_last_name,
        p.organization AS p_organization, p.email AS p_email, p.phone AS p_phone,
        p.date_of_birth AS p_date_of_birth
    FROM roster_entries re
    JOIN players p ON p.player_id = re.player_id
"""


def _row_to_entry(r: dict) -> RosterEntry:
    jersey = r.get("jersey_number")
    return RosterEntry(
        entry_id=int(r["entry_id"]),
        player_id=int(r["player_id"]),
        team_id=int(r["team_id"]),
        start_date=r["start_date"],
        end_date=r.get("end_date"),
        jersey_number=int(jersey) if jersey is not None else None,
        position=r.get("position"),
        player=row_to_player(r, prefix="p_"),
    )


def _conflict_from(exc: mysql.connector.IntegrityError) -> ValidationError:
    # Unique keys only constrain open entries (see database/schema.sql).
    msg = str(exc)
    if "uq_roster_active_jersey" in msg:
        return ValidationError("Jersey number is already taken", {"jersey_number": ErrorCode.DUPLICATE_JERSEY_NUMBER})
    if "uq_roster_active_player" in msg:
        return ValidationError("Player is already on this roster", {"player_id": ErrorCode.PLAYER_ALREADY_ROSTERED})
    return ValidationError(f"Roster write rejected: {msg}")


class MySQLRosterRepository(RosterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, entry_id: int) -> Optional[RosterEntry]:
        r = query_one(self._conn_factory, _SELECT + " WHERE re.entry_id=%s", (int(entry_id),))
        return _row_to_entry(r) if r else None

    def list_active(self, team_id: int, *, on: date) -> Sequence[RosterEntry]:
        rows = query_all(
            self._conn_factory,
            _SELECT
            + """
            WHERE re.team_id=%s AND (re.end_date IS NULL OR re.end_date > %s)
            ORDER BY re.jersey_number IS NULL, re.jersey_number ASC, p.last_name ASC
            """,
            (int(team_id), on),
        )
        return [_row_to_entry(r) for r in rows]

    def list_for_team(self, team_id: int) -> Sequence[RosterEntry]:
        rows = query_all(
            self._conn_factory,
            _SELECT + " WHERE re.team_id=%s ORDER BY re.start_date ASC, p.last_name ASC",
            (int(team_id),),
        )
        return [_row_to_entry(r) for r in rows]

    def create(
        self,
        *,
        team_id: int,
        player_id: int,
        start_date: date,
        jersey_number: Optional[int],
        position: Optional[str],
    ) -> int:
        entry_id, _ = execute_write(
            self._conn_factory,
            """
            INSERT INTO roster_entries(team_id, player_id, start_date, jersey_number, position)
            VALUES(%s,%s,%s,%s,%s)
            """,
            (int(team_id), int(player_id), start_date, jersey_number, position),
            failure=f"Failed to add player {player_id} to roster",
            key=player_id,
            on_conflict=_conflict_from,
        )
        return entry_id

    def update(self, *, entry_id: int, jersey_number: Optional[int], position: Optional[str]) -> bool:
        _, affected = execute_write(
            self._conn_factory,
            "UPDATE roster_entries SET jersey_number=%s, position=%s WHERE entry_id=%s",
            (jersey_number, position, int(entry_id)),
            failure=f"Failed to update roster entry {entry_id}",
            key=entry_id,
            on_conflict=_conflict_from,
        )
        return affected > 0

    def end(self, *, entry_id: int, end_date: date) -> bool:
        _, affected = execute_write(
            self._conn_factory,
            """
            UPDATE roster_entries SET end_date=%s
            WHERE entry_id=%s AND (end_date IS NULL OR end_date > %s)
            """,
            (end_date, int(entry_id), end_date),
            failure=f"Failed to remove roster entry {entry_id}",
            key=entry_id,
        )
        return affected > 0
