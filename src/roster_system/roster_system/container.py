from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import REPORT_FETCH_LIMIT
from .database.connection import DBConfig, DatabaseConnection
from .players.mysql_player_repository import MySQLPlayerRepository
from .players.service import PlayerService
from .reports.service import ReportService
from .rosters.mysql_roster_repository import MySQLRosterRepository
from .rosters.service import RosterService
from .teams.mysql_team_repository import MySQLTeamRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    teams_repo: MySQLTeamRepository
    players_repo: MySQLPlayerRepository
    rosters_repo: MySQLRosterRepository
    attendance_repo: MySQLAttendanceRepository

    player_service: PlayerService
    roster_service: RosterService
    attendance_service: AttendanceService
    report_service: ReportService


def build_container(*, db_config: dict, report_fetch_limit: int = REPORT_FETCH_LIMIT) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    teams_repo = MySQLTeamRepository(conn)
    players_repo = MySQLPlayerRepository(conn)
    rosters_repo = MySQLRosterRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    return Container(
        conn=conn,
        teams_repo=teams_repo,
        players_repo=players_repo,
        rosters_repo=rosters_repo,
        attendance_repo=attendance_repo,
        player_service=PlayerService(players_repo),
        roster_service=RosterService(rosters_repo, teams_repo, players_repo),
        attendance_service=AttendanceService(attendance_repo, rosters_repo, teams_repo),
        report_service=ReportService(attendance_repo, rosters_repo, teams_repo, fetch_limit=report_fetch_limit),
    )
