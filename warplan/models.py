"""
Data models for the war allocation engine.
Domain objects only — no persistence or allocation logic.

Participants and groups are built fresh for every allocation call;
TacticTemplate mirrors one persisted row of the template store.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Iterable, Mapping


# ---------- War type ----------
class WarType(str, Enum):
    """Activity kinds a tactic can be used on. The two Guandu kinds are high-demand."""
    GUANDU_ONE = "GUANDU_ONE"
    GUANDU_TWO = "GUANDU_TWO"
    SIEGE = "SIEGE"
    DEFENSE = "DEFENSE"

    @property
    def description(self) -> str:
        return _WAR_TYPE_DESCRIPTIONS[self]

    @staticmethod
    def is_guandu(war_type: WarType | str | None) -> bool:
        if war_type is None:
            return False
        return war_type in (WarType.GUANDU_ONE, WarType.GUANDU_TWO)

    @staticmethod
    def all_guandu() -> frozenset[WarType]:
        return frozenset({WarType.GUANDU_ONE, WarType.GUANDU_TWO})


_WAR_TYPE_DESCRIPTIONS: dict[WarType, str] = {
    WarType.GUANDU_ONE: "官渡一",
    WarType.GUANDU_TWO: "官渡二",
    WarType.SIEGE: "攻城",
    WarType.DEFENSE: "守城",
}


def parse_war_type(value: str | None) -> WarType | None:
    """Parse war type string to enum; None if invalid or empty."""
    if not value:
        return None
    try:
        return WarType(value.strip().upper())
    except ValueError:
        return None


# ---------- Participant ----------
@dataclass(frozen=True)
class Participant:
    """
    One game account in a ranked list.
    rank is the 1-based position in the (possibly truncated) input list.
    """
    id: Any
    name: str
    rank: int

    @classmethod
    def rank_list(cls, records: Iterable[Any]) -> list[Participant]:
        """
        Build ranked participants from records already sorted by the caller.
        Accepts Participant values, (id, name) pairs or mappings with id/name keys.
        """
        ranked: list[Participant] = []
        for i, rec in enumerate(records):
            if isinstance(rec, Participant):
                pid, name = rec.id, rec.name
            elif isinstance(rec, Mapping):
                pid, name = rec["id"], rec.get("name")
            else:
                pid, name = rec
            ranked.append(cls(id=pid, name="" if name is None else str(name), rank=i + 1))
        return ranked

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "rank": self.rank}


# ---------- Group ----------
@dataclass
class Group:
    """
    One allocated group. members keep placement order; the first placed member leads.
    name and task stay empty until the owning tactic finalizes them.
    """
    name: str = ""
    task: str = ""
    members: list[Participant] = field(default_factory=list)

    @property
    def leader(self) -> Participant | None:
        return self.members[0] if self.members else None

    @property
    def member_ids(self) -> list[Any]:
        return [m.id for m in self.members]

    def add(self, participant: Participant) -> None:
        self.members.append(participant)

    def to_dict(self) -> dict[str, Any]:
        leader = self.leader
        return {
            "name": self.name,
            "task": self.task,
            "leader_id": leader.id if leader is not None else None,
            "member_ids": self.member_ids,
            "members": [m.to_dict() for m in self.members],
        }


# ---------- Template type ----------
class TemplateType(str, Enum):
    BUILTIN = "BUILTIN"  # Seeded override for a named static tactic
    CUSTOM = "CUSTOM"    # Authored by an alliance leader


# ---------- TacticTemplate (persisted row) ----------
@dataclass
class TacticTemplate:
    """
    Stored tactic template. config_json holds the raw template body;
    the allocation engine only ever reads it through the template store.
    """
    id: str
    tactic_key: str
    name: str
    template_type: str  # TemplateType value
    config_json: str
    created_at: datetime
    updated_at: datetime
    war_type: str | None = None  # WarType value
    alliance_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "tactic_key": self.tactic_key,
            "name": self.name,
            "template_type": self.template_type,
            "war_type": self.war_type,
            "alliance_id": self.alliance_id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
