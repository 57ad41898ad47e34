from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.roster_system.roster_system.database.bootstrap import apply_schema, list_tables
from src.roster_system.roster_system.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db = DBConfig.from_mapping(dict(settings.DB_CONFIG))
    conn = DatabaseConnection(db)

    schema_path = Path(__file__).resolve().parents[1] / "database" / "schema.sql"
    count = apply_schema(conn, schema_path=schema_path)
    tables = list_tables(conn)
    print(f"OK: {count} statements -> {db.user}@{db.host}:{db.port}/{db.database}")
    print("tables: " + ", ".join(tables))


if __name__ == "__main__":
    main()
