from __future__ import annotations

from pathlib import Path

from src.roster_system.roster_system.database.bootstrap import iter_sql_statements, schema_statements

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_schema_file_yields_table_statements_only():
    statements = schema_statements(SCHEMA.read_text(encoding="utf-8"))

    names = [s.split("(")[0].split()[-1] for s in statements]
    assert names == ["teams", "players", "roster_entries", "attendance_records"]
    assert all(s.upper().startswith("CREATE TABLE IF NOT EXISTS") for s in statements)


def test_semicolons_inside_quotes_do_not_split():
    sql = "INSERT INTO t VALUES ('a;b');\n-- note; ignored\nINSERT INTO t VALUES (\"c;d\")"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
    ]
