from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

# Quoted strings are matched whole so a ';' inside them does not end a statement.
_TOKEN = re.compile(r"'(?:[^'\\]|\\.)*'|\"(?:[^\"\\]|\\.)*\"|;|[^;'\"]+|['\"]", re.S)
_COMMENT_LINE = re.compile(r"(?m)^\s*--.*$")
# The target database comes from DB_CONFIG, not from the script.
_SKIPPED = re.compile(r"(?is)^\s*(CREATE\s+DATABASE|USE)\b")


def iter_sql_statements(sql: str) -> Iterator[str]:
    buf: list[str] = []
    for token in _TOKEN.findall(_COMMENT_LINE.sub("", sql)):
        if token != ";":
            buf.append(token)
            continue
        stmt = "".join(buf).strip()
        buf.clear()
        if stmt:
            yield stmt

    tail = "".join(buf).strip()
    if tail:
        yield tail


def schema_statements(sql: str) -> Iterable[str]:
    return [s for s in iter_sql_statements(sql) if not _SKIPPED.match(s)]


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> int:
    """Create the database and run every statement of ``schema_path``.

    Statements use CREATE ... IF NOT EXISTS, so applying twice is harmless.
    Returns the number of statements executed.
    """

    ensure_database_exists(conn_factory)
    statements = schema_statements(Path(schema_path).read_text(encoding="utf-8"))

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()

    logger.info("Applied %d schema statements from %s", len(statements), schema_path)
    return len(statements)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return sorted(row[0] for row in cur.fetchall())
    finally:
        conn.close()
