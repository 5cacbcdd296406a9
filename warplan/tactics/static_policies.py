"""
Static tactic policies: hard-coded rank tables used when no template applies.

Each policy is plain data (group labels, a rank table for ranks 1-30, and a
task text per group) registered in STATIC_POLICIES. Naming and task text are
produced by small pure functions, so adding a tactic means adding an entry,
not a new class.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from warplan.models import Group, Participant, WarType
from warplan.tactics.backfill import backfill_round_robin, place_ranks
from warplan.tactics.placeholders import names_for_ranks

PENDING_TASK = "官渡开放后：待分配"


@dataclass(frozen=True)
class TaskSpec:
    """
    Task text for one group. Each {n} slot is filled with the names of
    rank_sets[n], e.g. TaskSpec("{0} 去乌巢", ((4,),)).
    """
    template: str
    rank_sets: tuple[tuple[int, ...], ...] = ()

    def render(self, participants: Sequence[Participant]) -> str:
        names = [names_for_ranks(participants, ranks) for ranks in self.rank_sets]
        return self.template.format(*names)


def located_group_name(label: str, leader_name: str) -> str:
    """兵器坊 + 张三 -> 兵器坊（车头：张三）"""
    return f"{label}（车头：{leader_name}）"


@dataclass(frozen=True)
class StaticPolicy:
    tactic_key: str
    supported_war_types: frozenset[WarType]
    labels: tuple[str, ...]
    rank_table: tuple[tuple[int, ...], ...]
    tasks: tuple[TaskSpec, ...]

    @property
    def group_count(self) -> int:
        return len(self.rank_table)

    def group_name(self, index: int, leader_name: str) -> str:
        if index < len(self.labels):
            return located_group_name(self.labels[index], leader_name)
        return leader_name + "的小分队"

    def group_task(self, index: int, participants: Sequence[Participant]) -> str:
        if index < len(self.tasks):
            return self.tasks[index].render(participants)
        return PENDING_TASK

    def allocate(self, participants: Sequence[Participant]) -> list[Group]:
        groups = [Group() for _ in range(self.group_count)]
        placed: set[int] = set()
        for group, ranks in zip(groups, self.rank_table):
            place_ranks(group, ranks, participants, placed)
        backfill_round_robin(groups, participants, placed)

        for i, group in enumerate(groups):
            if group.leader is None:
                continue
            group.name = self.group_name(i, group.leader.name)
            group.task = self.group_task(i, participants)
        return groups


_GUANDU = WarType.all_guandu()

TACTIC_ONE = StaticPolicy(
    tactic_key="TACTIC_ONE",
    supported_war_types=_GUANDU,
    labels=("兵器坊", "工匠坊", "对方上路小粮仓", "我方上路小粮仓", "我方下路小粮仓", "我方中路小粮仓"),
    rank_table=(
        (1, 4, 8, 15, 16, 21, 23),
        (2, 5, 10, 17, 18, 22, 24),
        (3, 11, 14, 19, 25),
        (6, 12, 13, 28),
        (7, 20, 27, 29),
        (9, 26, 30),
    ),
    tasks=(
        TaskSpec("{0} 去乌巢，官渡开放后：所有成员抢官渡", ((4,),)),
        TaskSpec(
            "{0} 去乌巢，官渡开放后：{1} 去霹雳车，{2} 去黎阳，{3} 去敖仓",
            ((5,), (2, 5, 10), (17,), (18,)),
        ),
        TaskSpec("{0} 去乌巢，官渡开放后：{1} 去黎阳，{2} 去敖仓", ((3,), (3, 11, 14), (25,))),
        TaskSpec("官渡开放后：{0} 去敖仓，{1} 去兵器坊", ((6, 12), (26,))),
        TaskSpec("官渡开放后：{0} 去兵器坊，{1} 去工匠坊", ((7, 20), (29,))),
        TaskSpec("官渡开放后：{0} 去工匠坊", ((9, 26),)),
    ),
)

TACTIC_TWO = StaticPolicy(
    tactic_key="TACTIC_TWO",
    supported_war_types=_GUANDU,
    labels=("兵器坊", "工匠坊", "对方上路小粮仓", "对方下路小粮仓", "我方上路小粮仓", "我方下路小粮仓"),
    rank_table=(
        (1, 3, 8, 15, 16, 21, 23),
        (2, 4, 10, 17, 18, 22, 24),
        (5, 11, 14, 19, 25),
        (6, 26, 27, 30),
        (7, 12, 13, 20),
        (9, 28, 29),
    ),
    tasks=(
        TaskSpec("官渡开放后：所有成员抢官渡"),
        TaskSpec("官渡开放后：{0} 抢霹雳车", ((2, 4, 10, 17, 18),)),
        TaskSpec("官渡开放后：{0} 抢黎阳，{1} 抢敖仓", ((5, 11, 14), (25,))),
        TaskSpec("官渡开放后：{0} 去工匠坊", ((6, 26),)),
        TaskSpec("官渡开放后：{0} 抢敖仓，{1} 去兵器坊", ((7, 12), (13,))),
        TaskSpec("官渡开放后：{0} 去兵器坊，{1} 去工匠坊", ((9, 28), (29,))),
    ),
)

STATIC_POLICIES: Mapping[str, StaticPolicy] = {
    TACTIC_ONE.tactic_key: TACTIC_ONE,
    TACTIC_TWO.tactic_key: TACTIC_TWO,
}


def list_static_tactics(war_type: WarType | None = None) -> list[StaticPolicy]:
    """For callers picking applicable tactics: all policies, or those supporting war_type."""
    return [
        p for p in STATIC_POLICIES.values()
        if war_type is None or war_type in p.supported_war_types
    ]
