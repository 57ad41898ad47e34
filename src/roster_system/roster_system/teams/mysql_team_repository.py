from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import query_all, query_one
from .model import Team
from .repository import TeamRepository

_COLUMNS = "team_id, name, organization, division, age_group, skill_level, description"


def row_to_team(r: dict) -> Team:
    return Team(
        team_id=int(r["team_id"]),
        name=r["name"],
        organization=r["organization"],
        division=r.get("division"),
        age_group=r.get("age_group"),
        skill_level=r.get("skill_level"),
        description=r.get("description"),
    )


class MySQLTeamRepository(TeamRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, team_id: int) -> Optional[Team]:
        r = query_one(self._conn_factory, f"SELECT {_COLUMNS} FROM teams WHERE team_id=%s", (int(team_id),))
        return row_to_team(r) if r else None

    def list_all(self) -> Sequence[Team]:
        rows = query_all(self._conn_factory, f"SELECT {_COLUMNS} FROM teams ORDER BY organization ASC, name ASC")
        return [row_to_team(r) for r in rows]
