from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, like_pattern, query_all, query_one
from .model import Player
from .repository import PlayerRepository

_COLUMNS = """
    player_id, first_name, last_name, organization, email, phone, date_of_birth,
    emergency_contact_name, emergency_contact_phone, emergency_contact_relation, medical_alerts
"""

_SEARCH_FIELDS = ("first_name", "last_name", "email", "phone", "organization")


def row_to_player(r: dict, *, prefix: str = "") -> Player:
    return Player(
        player_id=int(r[f"{prefix}player_id"]),
        first_name=r[f"{prefix}first_name"],
        last_name=r[f"{prefix}last_name"],
        organization=r.get(f"{prefix}organization") or "",
        email=r.get(f"{prefix}email"),
        phone=r.get(f"{prefix}phone"),
        date_of_birth=r.get(f"{prefix}date_of_birth"),
        emergency_contact_name=r.get(f"{prefix}emergency_contact_name"),
        emergency_contact_phone=r.get(f"{prefix}emergency_contact_phone"),
        emergency_contact_relation=r.get(f"{prefix}emergency_contact_relation"),
        medical_alerts=r.get(f"{prefix}medical_alerts"),
    )


class MySQLPlayerRepository(PlayerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, player_id: int) -> Optional[Player]:
        r = query_one(self._conn_factory, f"SELECT {_COLUMNS} FROM players WHERE player_id=%s", (int(player_id),))
        return row_to_player(r) if r else None

    def list_for_organization(self, organization: str, *, limit: int) -> Sequence[Player]:
        rows = query_all(
            self._conn_factory,
            f"""
            SELECT {_COLUMNS}
            FROM players
            WHERE organization=%s
            ORDER BY last_name ASC, first_name ASC
            LIMIT %s
            """,
            (organization, int(limit)),
        )
        return [row_to_player(r) for r in rows]

    def search(self, *, text: str, offset: int, limit: int) -> tuple[Sequence[Player], int]:
        where = ""
        params: list[object] = []
        if text:
            pattern = like_pattern(text)
            where = "WHERE " + " OR ".join(f"{f} LIKE %s" for f in _SEARCH_FIELDS)
            params.extend([pattern] * len(_SEARCH_FIELDS))

        with db_cursor(self._conn_factory) as cur:
            # Count and page share one transaction snapshot.
            cur.execute(f"SELECT COUNT(*) AS total FROM players {where}", tuple(params))
            total = int((cur.fetchone() or {}).get("total") or 0)

            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM players
                {where}
                ORDER BY last_name ASC, first_name ASC
                LIMIT %s OFFSET %s
                """,
                tuple(params + [int(limit), int(offset)]),
            )
            return [row_to_player(r) for r in cur.fetchall()], total
