"""
Tests for domain values: ranking input records, group rendering, war types.
"""
from __future__ import annotations

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from warplan.models import Group, Participant, WarType, parse_war_type


def test_rank_list_accepts_mixed_records():
    ranked = Participant.rank_list([
        {"id": 7, "name": "甲"},
        (8, "乙"),
        Participant(id=9, name="丙", rank=42),
        {"id": 10, "name": None},
    ])
    assert [(p.id, p.name, p.rank) for p in ranked] == [(7, "甲", 1), (8, "乙", 2), (9, "丙", 3), (10, "", 4)]


def test_group_leader_and_dict():
    group = Group(name="兵器坊（车头：甲）", task="抢官渡")
    assert group.leader is None
    assert group.to_dict()["leader_id"] is None
    a, b = Participant.rank_list([(1, "甲"), (2, "乙")])
    group.add(a)
    group.add(b)
    assert group.leader == a
    assert group.to_dict() == {
        "name": "兵器坊（车头：甲）",
        "task": "抢官渡",
        "leader_id": 1,
        "member_ids": [1, 2],
        "members": [
            {"id": 1, "name": "甲", "rank": 1},
            {"id": 2, "name": "乙", "rank": 2},
        ],
    }


def test_war_types():
    assert WarType.is_guandu(WarType.GUANDU_ONE)
    assert WarType.is_guandu("GUANDU_TWO")
    assert not WarType.is_guandu(WarType.SIEGE)
    assert not WarType.is_guandu(None)
    assert WarType.all_guandu() == {WarType.GUANDU_ONE, WarType.GUANDU_TWO}
    assert WarType.DEFENSE.description == "守城"
    assert parse_war_type(" guandu_one ") == WarType.GUANDU_ONE
    assert parse_war_type("naval") is None
    assert parse_war_type("") is None
