"""
Repository interfaces for tactic templates.
No business logic — only read/write operations.
"""
from __future__ import annotations

import sqlite3
import uuid
from datetime import datetime, timezone
from pathlib import Path

from warplan.models import TacticTemplate

from .db import get_connection


def _parse_datetime(s: str | None) -> datetime:
    if s is None:
        raise ValueError("expected datetime string")
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _now_iso() -> str:
    # Fixed width so updated_at sorts correctly as text
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


_COLUMNS = "id, tactic_key, name, template_type, war_type, alliance_id, config_json, created_at, updated_at"


def _row_to_template(row: sqlite3.Row) -> TacticTemplate:
    r = dict(row)
    return TacticTemplate(
        id=r["id"],
        tactic_key=r["tactic_key"],
        name=r["name"],
        template_type=r["template_type"],
        war_type=r["war_type"],
        alliance_id=r["alliance_id"],
        config_json=r["config_json"],
        created_at=_parse_datetime(r["created_at"]),
        updated_at=_parse_datetime(r["updated_at"]),
    )


# ---------- TacticTemplateRepository ----------


class TacticTemplateRepository:
    """CRUD for tactic_templates. tactic_key is unique."""

    def create(
        self,
        conn: sqlite3.Connection,
        tactic_key: str,
        name: str,
        template_type: str,
        config_json: str,
        war_type: str | None = None,
        alliance_id: str | None = None,
        id: str | None = None,
    ) -> TacticTemplate:
        tid = id or str(uuid.uuid4())
        now = _now_iso()
        conn.execute(
            f"INSERT INTO tactic_templates ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
            (tid, tactic_key, name, template_type, war_type, alliance_id, config_json, now, now),
        )
        conn.commit()
        return TacticTemplate(
            id=tid, tactic_key=tactic_key, name=name, template_type=template_type,
            war_type=war_type, alliance_id=alliance_id, config_json=config_json,
            created_at=_parse_datetime(now), updated_at=_parse_datetime(now),
        )

    def get(self, conn: sqlite3.Connection, template_id: str) -> TacticTemplate | None:
        row = conn.execute(
            f"SELECT {_COLUMNS} FROM tactic_templates WHERE id = ?", (template_id,)
        ).fetchone()
        return _row_to_template(row) if row is not None else None

    def get_by_key(self, conn: sqlite3.Connection, tactic_key: str) -> TacticTemplate | None:
        row = conn.execute(
            f"SELECT {_COLUMNS} FROM tactic_templates WHERE tactic_key = ?", (tactic_key,)
        ).fetchone()
        return _row_to_template(row) if row is not None else None

    def get_config_json(self, conn: sqlite3.Connection, tactic_key: str) -> str | None:
        row = conn.execute(
            "SELECT config_json FROM tactic_templates WHERE tactic_key = ?", (tactic_key,)
        ).fetchone()
        return row[0] if row is not None else None

    def update(self, conn: sqlite3.Connection, template_id: str, name: str, config_json: str) -> None:
        conn.execute(
            "UPDATE tactic_templates SET name = ?, config_json = ?, updated_at = ? WHERE id = ?",
            (name, config_json, _now_iso(), template_id),
        )
        conn.commit()

    def upsert_builtin(self, conn: sqlite3.Connection, tactic_key: str, name: str, config_json: str) -> TacticTemplate:
        """Insert or replace the template overriding a named static tactic."""
        existing = self.get_by_key(conn, tactic_key)
        if existing is None:
            return self.create(conn, tactic_key, name, "BUILTIN", config_json)
        self.update(conn, existing.id, name, config_json)
        return self.get(conn, existing.id) or existing

    def delete(self, conn: sqlite3.Connection, template_id: str) -> None:
        conn.execute("DELETE FROM tactic_templates WHERE id = ?", (template_id,))
        conn.commit()

    def list_by_alliance(
        self,
        conn: sqlite3.Connection,
        alliance_id: str,
        war_type: str,
        template_type: str,
    ) -> list[TacticTemplate]:
        """Most recently updated first."""
        rows = conn.execute(
            f"SELECT {_COLUMNS} FROM tactic_templates "
            "WHERE alliance_id = ? AND war_type = ? AND template_type = ? "
            "ORDER BY updated_at DESC, rowid DESC",
            (alliance_id, war_type, template_type),
        ).fetchall()
        return [_row_to_template(r) for r in rows]


# ---------- SqliteTemplateStore ----------


class SqliteTemplateStore:
    """
    Template store read by the allocator: get(tactic_key) -> raw JSON or None.
    Opens a connection per read, so one store can serve concurrent allocations.
    """

    def __init__(self, db_path: str | Path | None = None) -> None:
        self._db_path = db_path
        self._repo = TacticTemplateRepository()

    def get(self, tactic_key: str) -> str | None:
        conn = get_connection(self._db_path)
        try:
            return self._repo.get_config_json(conn, tactic_key)
        finally:
            conn.close()
