"""
Allocation driver: pick the tactic, truncate, resolve, fall back.

  1. Empty input -> no groups.
  2. High-demand (Guandu) tactics only use the first HIGH_DEMAND_LIMIT participants.
  3. A stored template for the key wins.
  4. Otherwise the static policy for the key; neither -> UnsupportedTacticError.

Both paths finish with the same round-robin backfill, so every participant
of the (truncated) list is in exactly one group.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from warplan.models import Group, Participant, WarType
from warplan.tactics.resolver import TemplateDecoder, TemplateResolver, TemplateStore
from warplan.tactics.static_policies import STATIC_POLICIES, StaticPolicy

logger = logging.getLogger(__name__)

HIGH_DEMAND_LIMIT = 30


class UnsupportedTacticError(ValueError):
    """Requested tactic has neither a usable template nor a static policy."""


class TacticAllocator:
    """
    Allocates ranked participants into tactic groups.
    The template store and decoder are injected; static policies default to STATIC_POLICIES.
    """

    def __init__(
        self,
        template_store: TemplateStore,
        decoder: TemplateDecoder | None = None,
        policies: Mapping[str, StaticPolicy] | None = None,
    ) -> None:
        self._resolver = TemplateResolver(template_store, decoder)
        self._policies = STATIC_POLICIES if policies is None else policies

    def is_high_demand(self, tactic_key: str, war_type: WarType | None = None) -> bool:
        policy = self._policies.get(tactic_key)
        if policy is not None:
            return any(WarType.is_guandu(w) for w in policy.supported_war_types)
        return WarType.is_guandu(war_type)

    def allocate(
        self,
        tactic_key: str,
        participants: Iterable[Any],
        war_type: WarType | None = None,
    ) -> list[Group]:
        """
        Allocate participants (already sorted best first) for tactic_key.
        Accepts Participant values or (id, name) records; ranks follow input order.
        The caller's sequence is never modified.
        """
        ranked = Participant.rank_list(participants)
        if not ranked:
            return []

        if self.is_high_demand(tactic_key, war_type) and len(ranked) > HIGH_DEMAND_LIMIT:
            logger.debug("Truncating %d participants to %d for %s", len(ranked), HIGH_DEMAND_LIMIT, tactic_key)
            ranked = ranked[:HIGH_DEMAND_LIMIT]

        resolution = self._resolver.resolve(tactic_key, ranked)
        if resolution.found:
            logger.debug("Allocated %s from stored template", tactic_key)
            return resolution.groups

        policy = self._policies.get(tactic_key)
        if policy is None:
            raise UnsupportedTacticError(f"找不到指定的战术: {tactic_key}")
        if war_type is not None and war_type not in policy.supported_war_types:
            raise UnsupportedTacticError("该战术不支持当前战事类型")
        logger.debug("Allocated %s from static policy (%s)", tactic_key, resolution.reason)
        return policy.allocate(ranked)


def allocate_tactic(
    template_store: TemplateStore,
    tactic_key: str,
    participants: Iterable[Any],
    war_type: WarType | None = None,
) -> list[Group]:
    """One-shot allocation with default decoder and static policies."""
    return TacticAllocator(template_store).allocate(tactic_key, participants, war_type)
