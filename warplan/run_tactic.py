"""
Allocate a ranked participant list with a tactic and print the groups.

Participants come from a JSON array, best first: [{"id": 1, "name": "..."}, ...]
or [[1, "..."], ...]. Templates are read from the sqlite store; without one
the static policy for the key is used.

Run from project root: python -m warplan.run_tactic TACTIC_ONE accounts.json
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from warplan.models import Group, parse_war_type
from warplan.persistence.db import get_db_path, init_db, set_db_path
from warplan.persistence.repositories import SqliteTemplateStore
from warplan.tactics.allocation import TacticAllocator, UnsupportedTacticError

LOG_LEVEL = os.environ.get("WARPLAN_LOG_LEVEL", "WARNING").upper()


def _load_participants(path: Path) -> list:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise SystemExit(f"{path}: expected a JSON array of participants")
    return data


def _print_groups(groups: list[Group]) -> None:
    for i, group in enumerate(groups, start=1):
        print(f"[{i}] {group.name or '(unnamed)'}")
        if group.task:
            print(f"    {group.task}")
        names = ", ".join(f"{m.rank}.{m.name}" for m in group.members)
        print(f"    {names or '-'}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Allocate ranked participants into tactic groups")
    parser.add_argument("tactic", help="Tactic key, e.g. TACTIC_ONE or a CUSTOM_... key")
    parser.add_argument("participants", type=Path, help="JSON file with participants, best first")
    parser.add_argument("--war-type", default=None, help="GUANDU_ONE, GUANDU_TWO, SIEGE or DEFENSE")
    parser.add_argument("--db", type=Path, default=None, help="Template store path (default: WARPLAN_DB_PATH)")
    parser.add_argument("--json", action="store_true", help="Print groups as JSON")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    if args.db is not None:
        set_db_path(args.db)
    init_db(get_db_path())

    war_type = parse_war_type(args.war_type)
    if args.war_type and war_type is None:
        parser.error(f"unknown war type: {args.war_type}")

    allocator = TacticAllocator(SqliteTemplateStore(get_db_path()))
    try:
        groups = allocator.allocate(args.tactic, _load_participants(args.participants), war_type)
    except UnsupportedTacticError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps([g.to_dict() for g in groups], ensure_ascii=False, indent=2))
    else:
        _print_groups(groups)
    return 0


if __name__ == "__main__":
    sys.exit(main())
