"""
Tests for the static tactic tables: placement, backfill, naming and task text.
"""
from __future__ import annotations

from pathlib import Path

import pytest

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from warplan.models import Participant, WarType
from warplan.tactics.static_policies import (
    STATIC_POLICIES,
    TACTIC_ONE,
    TACTIC_TWO,
    StaticPolicy,
    TaskSpec,
    list_static_tactics,
)


def _accounts(n: int) -> list[Participant]:
    return Participant.rank_list((i, f"账号{i}") for i in range(1, n + 1))


@pytest.mark.parametrize("policy", [TACTIC_ONE, TACTIC_TWO])
def test_rank_tables_cover_ranks_1_to_30_once(policy):
    ranks = [r for group in policy.rank_table for r in group]
    assert sorted(ranks) == list(range(1, 31))
    assert policy.group_count == 6
    assert len(policy.labels) == 6
    assert len(policy.tasks) == 6


def test_tactic_one_full_roster():
    groups = TACTIC_ONE.allocate(_accounts(30))
    assert [g.member_ids for g in groups] == [list(r) for r in TACTIC_ONE.rank_table]
    assert groups[0].name == "兵器坊（车头：账号1）"
    assert groups[5].name == "我方中路小粮仓（车头：账号9）"
    assert groups[0].task == "账号4 去乌巢，官渡开放后：所有成员抢官渡"
    assert groups[1].task == "账号5 去乌巢，官渡开放后：账号2,账号5,账号10 去霹雳车，账号17 去黎阳，账号18 去敖仓"
    assert groups[5].task == "官渡开放后：账号9,账号26 去工匠坊"


def test_tactic_one_short_roster_keeps_missing_ranks_as_numbers():
    groups = TACTIC_ONE.allocate(_accounts(10))
    assert [g.member_ids for g in groups] == [[1, 4, 8], [2, 5, 10], [3], [6], [7], [9]]
    assert groups[1].task == "账号5 去乌巢，官渡开放后：账号2,账号5,账号10 去霹雳车，17 去黎阳，18 去敖仓"
    assert groups[3].task == "官渡开放后：账号6,12 去敖仓，26 去兵器坊"


def test_tactic_two_full_roster():
    groups = TACTIC_TWO.allocate(_accounts(30))
    assert [g.member_ids for g in groups] == [list(r) for r in TACTIC_TWO.rank_table]
    assert groups[3].name == "对方下路小粮仓（车头：账号6）"
    assert groups[0].task == "官渡开放后：所有成员抢官渡"
    assert groups[1].task == "官渡开放后：账号2,账号4,账号10,账号17,账号18 抢霹雳车"
    assert groups[4].task == "官渡开放后：账号7,账号12 抢敖仓，账号13 去兵器坊"


def test_empty_groups_stay_unnamed():
    groups = TACTIC_TWO.allocate(_accounts(3))
    assert [g.member_ids for g in groups] == [[1, 3], [2], [], [], [], []]
    for g in groups[2:]:
        assert g.name == ""
        assert g.task == ""


def test_backfill_round_robin_for_unlisted_ranks():
    policy = StaticPolicy(
        tactic_key="TEST",
        supported_war_types=frozenset({WarType.SIEGE}),
        labels=("东门", "西门"),
        rank_table=((1,), (2,)),
        tasks=(TaskSpec("守 {0}", ((1,),)), TaskSpec("守西门")),
    )
    groups = policy.allocate(_accounts(6))
    assert [g.member_ids for g in groups] == [[1, 3, 5], [2, 4, 6]]
    assert groups[0].name == "东门（车头：账号1）"
    assert groups[0].task == "守 账号1"


def test_duplicate_ranks_across_groups_first_wins():
    policy = StaticPolicy(
        tactic_key="TEST",
        supported_war_types=frozenset({WarType.SIEGE}),
        labels=("A", "B"),
        rank_table=((1, 2), (2, 3)),
        tasks=(),
    )
    groups = policy.allocate(_accounts(3))
    assert [g.member_ids for g in groups] == [[1, 2], [3]]
    assert groups[1].task == "官渡开放后：待分配"


def test_groups_beyond_labels_use_squad_name():
    policy = StaticPolicy(
        tactic_key="TEST",
        supported_war_types=frozenset({WarType.SIEGE}),
        labels=("A",),
        rank_table=((1,), (2,)),
        tasks=(),
    )
    groups = policy.allocate(_accounts(2))
    assert groups[1].name == "账号2的小分队"


def test_registry_and_listing():
    assert set(STATIC_POLICIES) == {"TACTIC_ONE", "TACTIC_TWO"}
    assert [p.tactic_key for p in list_static_tactics(WarType.GUANDU_TWO)] == ["TACTIC_ONE", "TACTIC_TWO"]
    assert list_static_tactics(WarType.SIEGE) == []
