"""
Template resolver: build groups from a stored tactic template.

Fail-soft boundary. A missing key, an unreachable store, a malformed body or
any error while building groups yields a TemplateResolution that is not
found; the allocator then falls back to the static policy. Nothing raised
here reaches the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Protocol, Sequence

from warplan.models import Group, Participant
from warplan.tactics.backfill import backfill_round_robin, place_ranks
from warplan.tactics.placeholders import replace_rank_placeholders
from warplan.tactics.rank_expression import parse_rank_expressions
from warplan.tactics.schemas import TemplateConfig, decode_template

logger = logging.getLogger(__name__)

SQUAD_SUFFIX = "的小分队"
PENDING_TASK = "官渡开放后：待分配"


class TemplateStore(Protocol):
    """Read side of the template store. Unknown keys return None."""

    def get(self, tactic_key: str) -> str | None: ...


TemplateDecoder = Callable[[str], TemplateConfig]


class ResolutionStatus(str, Enum):
    FOUND = "found"
    MISSING = "missing"   # No template stored for the key
    INVALID = "invalid"   # Store failure, malformed body, empty template or build error


@dataclass
class TemplateResolution:
    status: ResolutionStatus
    groups: list[Group] = field(default_factory=list)
    reason: str | None = None

    @property
    def found(self) -> bool:
        return self.status == ResolutionStatus.FOUND

    @classmethod
    def of(cls, groups: list[Group]) -> TemplateResolution:
        return cls(status=ResolutionStatus.FOUND, groups=groups)

    @classmethod
    def missing(cls, tactic_key: str) -> TemplateResolution:
        return cls(status=ResolutionStatus.MISSING, reason=f"no template for {tactic_key}")

    @classmethod
    def invalid(cls, reason: str) -> TemplateResolution:
        return cls(status=ResolutionStatus.INVALID, reason=reason)


def build_groups_from_template(config: TemplateConfig, participants: Sequence[Participant]) -> list[Group]:
    """
    Declared groups in order: names and tasks through placeholder substitution,
    members from rank expressions, then round-robin backfill and default naming.
    """
    groups: list[Group] = []
    placed: set[int] = set()
    for group_config in config.groups or []:
        group = Group(
            name=replace_rank_placeholders(group_config.name, participants) or "",
            task=replace_rank_placeholders(group_config.task, participants) or "",
        )
        place_ranks(group, parse_rank_expressions(group_config.ranks), participants, placed)
        groups.append(group)

    backfill_round_robin(groups, participants, placed)

    for group in groups:
        if not group.name.strip() and group.leader is not None:
            group.name = group.leader.name + SQUAD_SUFFIX
        if not group.task.strip():
            group.task = PENDING_TASK
    return groups


class TemplateResolver:
    """Looks up a tactic template on every call; nothing is cached."""

    def __init__(self, store: TemplateStore, decoder: TemplateDecoder | None = None) -> None:
        self._store = store
        self._decoder = decoder or decode_template

    def resolve(self, tactic_key: str, participants: Sequence[Participant]) -> TemplateResolution:
        try:
            raw = self._store.get(tactic_key)
        except Exception as e:
            logger.warning("Template store read failed for %s: %s", tactic_key, e)
            return TemplateResolution.invalid(f"store unavailable: {e!s}")
        if raw is None:
            logger.debug("No template stored for %s", tactic_key)
            return TemplateResolution.missing(tactic_key)

        try:
            config = self._decoder(raw)
        except Exception as e:
            logger.warning("Template for %s could not be decoded: %s", tactic_key, e)
            return TemplateResolution.invalid(f"malformed template: {e!s}")
        if config is None or config.is_empty:
            logger.warning("Template for %s declares no groups", tactic_key)
            return TemplateResolution.invalid("template declares no groups")

        try:
            groups = build_groups_from_template(config, participants)
        except Exception as e:
            logger.warning("Template for %s failed to build groups: %s", tactic_key, e)
            return TemplateResolution.invalid(f"template build failed: {e!s}")
        return TemplateResolution.of(groups)
