"""
Completeness pass shared by template and static tactics.

Whatever the explicit rules leave out is dealt round-robin over the groups,
in rank order, so every participant lands in exactly one group.
"""
from __future__ import annotations

from typing import Sequence

from warplan.models import Group, Participant


def place_ranks(
    group: Group,
    ranks: Sequence[int],
    participants: Sequence[Participant],
    placed: set[int],
) -> None:
    """
    Place participants for 1-based ranks into group. Out-of-range ranks are ignored;
    a rank already placed (by any group) is a no-op, so the first writer wins.
    """
    for rank in ranks:
        idx = rank - 1
        if 0 <= idx < len(participants) and idx not in placed:
            group.add(participants[idx])
            placed.add(idx)


def backfill_round_robin(
    groups: Sequence[Group],
    participants: Sequence[Participant],
    placed: set[int],
) -> int:
    """
    Append each unplaced participant to groups[i % len(groups)], i counting placements.
    Independent of current group sizes. Marks them placed; returns how many were added.
    """
    if not groups:
        return 0
    next_group = 0
    for idx, participant in enumerate(participants):
        if idx in placed:
            continue
        groups[next_group % len(groups)].add(participant)
        placed.add(idx)
        next_group += 1
    return next_group
