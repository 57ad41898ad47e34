"""Thin helpers over mysql-connector for the repositories.

Each call opens its own short-lived connection; nothing is shared between
calls, so one failed write never rolls back another.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Dict, List, Optional, Sequence

import mysql.connector

from ..core.exceptions import DomainError, UpstreamWriteFailure
from .connection import DatabaseConnection

Row = Dict[str, Any]


@contextmanager
def db_cursor(conn_factory: DatabaseConnection):
    """Buffered dict cursor; commits on clean exit, rolls back on error."""

    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=True, buffered=True)
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def query_all(conn_factory: DatabaseConnection, sql: str, params: Sequence[object] = ()) -> List[Row]:
    with db_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return list(cur.fetchall() or [])


def query_one(conn_factory: DatabaseConnection, sql: str, params: Sequence[object] = ()) -> Optional[Row]:
    with db_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return cur.fetchone() or None


def execute_write(
    conn_factory: DatabaseConnection,
    sql: str,
    params: Sequence[object],
    *,
    failure: str,
    key: object = None,
    on_conflict: Optional[Callable[[mysql.connector.IntegrityError], DomainError]] = None,
) -> tuple[int, int]:
    """Run one INSERT/UPDATE and return ``(lastrowid, rowcount)``.

    Store errors surface as UpstreamWriteFailure carrying ``key``; unique-key
    violations go through ``on_conflict`` first when given.
    """

    try:
        with db_cursor(conn_factory) as cur:
            cur.execute(sql, tuple(params))
            return int(cur.lastrowid or 0), int(cur.rowcount)
    except mysql.connector.IntegrityError as exc:
        if on_conflict is not None:
            raise on_conflict(exc) from exc
        raise UpstreamWriteFailure(failure, key=key) from exc
    except mysql.connector.Error as exc:
        raise UpstreamWriteFailure(failure, key=key) from exc


def like_pattern(text: str) -> str:
    """``%text%`` with LIKE wildcards in ``text`` matched literally."""

    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
