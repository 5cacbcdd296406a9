"""
SQLite schema for tactic templates.
Migration-friendly: each table created with IF NOT EXISTS.
"""
from __future__ import annotations


def tactic_templates_schema() -> str:
    """One row per tactic key. template_type: BUILTIN | CUSTOM. config_json holds the raw template body."""
    return """
    CREATE TABLE IF NOT EXISTS tactic_templates (
        id TEXT PRIMARY KEY,
        tactic_key TEXT NOT NULL UNIQUE,
        name TEXT NOT NULL,
        template_type TEXT NOT NULL,
        war_type TEXT,
        alliance_id TEXT,
        config_json TEXT NOT NULL,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    );
    CREATE INDEX IF NOT EXISTS ix_tactic_templates_alliance ON tactic_templates(alliance_id, war_type, template_type);
    """


def all_schema_sql() -> str:
    return "\n".join([
        tactic_templates_schema(),
    ])
