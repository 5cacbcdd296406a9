"""
Tests for the command-line runner.
"""
from __future__ import annotations

import json
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from warplan.run_tactic import main


def _write_accounts(tmp_path: Path, n: int) -> Path:
    path = tmp_path / "accounts.json"
    path.write_text(
        json.dumps([{"id": i, "name": f"账号{i}"} for i in range(1, n + 1)], ensure_ascii=False),
        encoding="utf-8",
    )
    return path


def test_prints_static_groups_as_json(tmp_path, capsys):
    accounts = _write_accounts(tmp_path, 8)
    code = main(["TACTIC_TWO", str(accounts), "--db", str(tmp_path / "cli.db"), "--json"])
    assert code == 0
    groups = json.loads(capsys.readouterr().out)
    assert len(groups) == 6
    assert groups[0]["name"] == "兵器坊（车头：账号1）"
    assert sorted(pid for g in groups for pid in g["member_ids"]) == list(range(1, 9))


def test_prints_text_listing(tmp_path, capsys):
    accounts = _write_accounts(tmp_path, 3)
    assert main(["TACTIC_ONE", str(accounts), "--db", str(tmp_path / "cli.db")]) == 0
    out = capsys.readouterr().out
    assert "[1] 兵器坊（车头：账号1）" in out
    assert "1.账号1" in out


def test_unsupported_tactic_exit_code(tmp_path, capsys):
    accounts = _write_accounts(tmp_path, 3)
    assert main(["NO_SUCH", str(accounts), "--db", str(tmp_path / "cli.db")]) == 2
    assert "找不到指定的战术" in capsys.readouterr().err


def test_json_listing_carries_member_details(tmp_path, capsys):
    accounts = _write_accounts(tmp_path, 2)
    assert main(["TACTIC_TWO", str(accounts), "--db", str(tmp_path / "cli.db"), "--json"]) == 0
    groups = json.loads(capsys.readouterr().out)
    assert groups[0]["members"][0] == {"id": 1, "name": "账号1", "rank": 1}
