#!/usr/bin/env python3
"""
Vertical slice: Seed template → Create custom tactic → Allocate → Print.
Run from project root: python3 scripts/vertical_slice.py
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

# Ensure project root on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from warplan.models import WarType
from warplan.persistence import init_db, get_connection, TacticTemplateRepository, SqliteTemplateStore
from warplan.persistence.db import set_db_path
from warplan.services import CustomTacticService
from warplan.tactics import TacticAllocator


def main() -> None:
    # Use data/vertical_slice.db for demo (distinct from warplan.db)
    db_path = PROJECT_ROOT / "data" / "vertical_slice.db"
    set_db_path(db_path)
    init_db(db_path=db_path)

    accounts = [{"id": i, "name": f"账号{i}"} for i in range(1, 36)]
    allocator = TacticAllocator(SqliteTemplateStore(db_path))

    conn = get_connection()
    try:
        # 1. Static policy (no template stored for TACTIC_ONE)
        groups = allocator.allocate("TACTIC_ONE", accounts, WarType.GUANDU_ONE)
        print("TACTIC_ONE (static):")
        for g in groups:
            print(f"  {g.name}: {g.task}  {g.member_ids}")

        # 2. Builtin override for TACTIC_TWO
        override = {
            "groups": [
                {"name": "兵器坊（车头：1）", "task": "官渡开放后：1-3 抢官渡", "ranks": ["1-5"]},
                {"name": "", "task": "", "ranks": ["6,8,10"]},
            ]
        }
        TacticTemplateRepository().upsert_builtin(
            conn, "TACTIC_TWO", "战术二（模板）", json.dumps(override, ensure_ascii=False)
        )
        groups = allocator.allocate("TACTIC_TWO", accounts, WarType.GUANDU_ONE)
        print("TACTIC_TWO (template):")
        for g in groups:
            print(f"  {g.name}: {g.task}  {g.member_ids}")

        # 3. Custom tactic for an alliance
        detail = CustomTacticService().create(
            conn,
            alliance_id="alliance-1",
            war_type=WarType.GUANDU_TWO,
            name="双线推进",
            groups=[
                {"name": "上路（车头：1）", "task": "2,4 去乌巢", "ranks": ["1-4"]},
                {"name": "下路（车头：5）", "task": "6-7 去敖仓", "ranks": ["5-8"]},
            ],
        )
        groups = allocator.allocate(detail.template.tactic_key, accounts, WarType.GUANDU_TWO)
        print(f"{detail.template.tactic_key}:")
        for g in groups:
            print(f"  {g.name}: {g.task}  {g.member_ids}")
    finally:
        conn.close()


if __name__ == "__main__":
    main()
