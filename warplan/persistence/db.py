"""
SQLite access for tactic templates.

The database file comes from set_db_path(), else WARPLAN_DB_PATH, else
data/warplan.db under the project root. Its directory is created on demand.
"""
from __future__ import annotations

import logging
import os
import sqlite3
from pathlib import Path

from .schema import all_schema_sql

logger = logging.getLogger(__name__)

_db_path: Path | None = None


def set_db_path(path: str | Path) -> None:
    global _db_path
    _db_path = Path(path)


def get_db_path() -> Path:
    if _db_path is not None:
        return _db_path
    configured = os.environ.get("WARPLAN_DB_PATH", "").strip()
    if configured:
        return Path(configured)
    return Path(__file__).resolve().parent.parent.parent / "data" / "warplan.db"


def get_connection(db_path: str | Path | None = None, *, ensure_schema: bool = False) -> sqlite3.Connection:
    """
    Open a connection with sqlite3.Row rows; the caller closes it.
    With ensure_schema, the template tables are created first if missing.
    """
    path = Path(db_path) if db_path else get_db_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    if ensure_schema:
        try:
            conn.executescript(all_schema_sql())
            conn.commit()
        except sqlite3.Error:
            conn.close()
            raise
        logger.debug("Schema ensured at %s", path)
    return conn


def init_db(db_path: str | Path | None = None) -> None:
    get_connection(db_path, ensure_schema=True).close()
