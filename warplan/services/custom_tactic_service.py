"""
Custom tactics: alliance-authored templates stored under generated keys.
Only Guandu war types may carry custom tactics. Access control is out of scope;
callers decide who may manage an alliance's tactics.
"""
from __future__ import annotations

import sqlite3
import uuid
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from warplan.models import TacticTemplate, TemplateType, WarType
from warplan.persistence.repositories import TacticTemplateRepository
from warplan.tactics.schemas import GroupConfig, TemplateConfig, decode_template, encode_template

# ---------- Exceptions ----------


class CustomTacticError(ValueError):
    """Invalid custom tactic request (unknown template, wrong type, non-Guandu war)."""


@dataclass
class CustomTacticDetail:
    template: TacticTemplate
    groups: list[GroupConfig]

    def to_dict(self) -> dict[str, Any]:
        d = self.template.to_dict()
        d["groups"] = [g.model_dump() for g in self.groups]
        return d


def build_tactic_key(alliance_id: str, war_type: WarType) -> str:
    return f"CUSTOM_{alliance_id}_{war_type.value}_{uuid.uuid4()}"


def _require_guandu(war_type: WarType | str | None) -> WarType:
    if not WarType.is_guandu(war_type):
        raise CustomTacticError("自定义战术仅支持官渡战事")
    return WarType(war_type)


def _clean_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise CustomTacticError("战术名称不能为空")
    return cleaned


def _to_config(groups: list[GroupConfig | dict[str, Any]] | None) -> TemplateConfig:
    try:
        return TemplateConfig.model_validate({"groups": list(groups or [])})
    except ValidationError as e:
        raise CustomTacticError(f"战术配置无效: {e.error_count()} error(s)") from e


def _read_groups(config_json: str | None) -> list[GroupConfig]:
    """Stored bodies that no longer parse read back as no groups."""
    if not config_json or not config_json.strip():
        return []
    try:
        return decode_template(config_json).groups or []
    except ValidationError:
        return []


class CustomTacticService:
    """Create, update, delete and list custom tactic templates. Persistence via repository."""

    def __init__(self) -> None:
        self._repo = TacticTemplateRepository()

    def create(
        self,
        conn: sqlite3.Connection,
        alliance_id: str,
        war_type: WarType | str,
        name: str,
        groups: list[GroupConfig | dict[str, Any]] | None = None,
    ) -> CustomTacticDetail:
        wt = _require_guandu(war_type)
        config = _to_config(groups)
        template = self._repo.create(
            conn,
            tactic_key=build_tactic_key(alliance_id, wt),
            name=_clean_name(name),
            template_type=TemplateType.CUSTOM.value,
            config_json=encode_template(config),
            war_type=wt.value,
            alliance_id=alliance_id,
        )
        return CustomTacticDetail(template=template, groups=config.groups or [])

    def update(
        self,
        conn: sqlite3.Connection,
        template_id: str,
        name: str,
        groups: list[GroupConfig | dict[str, Any]] | None = None,
    ) -> CustomTacticDetail:
        template = self._get_custom_or_raise(conn, template_id)
        _require_guandu(template.war_type)
        config = _to_config(groups)
        self._repo.update(conn, template.id, _clean_name(name), encode_template(config))
        updated = self._repo.get(conn, template.id) or template
        return CustomTacticDetail(template=updated, groups=config.groups or [])

    def delete(self, conn: sqlite3.Connection, template_id: str) -> None:
        template = self._get_custom_or_raise(conn, template_id)
        self._repo.delete(conn, template.id)

    def get_detail(self, conn: sqlite3.Connection, template_id: str) -> CustomTacticDetail:
        template = self._get_custom_or_raise(conn, template_id)
        return CustomTacticDetail(template=template, groups=_read_groups(template.config_json))

    def list(self, conn: sqlite3.Connection, alliance_id: str, war_type: WarType | str) -> list[CustomTacticDetail]:
        wt = _require_guandu(war_type)
        templates = self._repo.list_by_alliance(conn, alliance_id, wt.value, TemplateType.CUSTOM.value)
        return [CustomTacticDetail(template=t, groups=_read_groups(t.config_json)) for t in templates]

    def _get_custom_or_raise(self, conn: sqlite3.Connection, template_id: str) -> TacticTemplate:
        template = self._repo.get(conn, template_id)
        if template is None:
            raise CustomTacticError("战术不存在")
        if template.template_type != TemplateType.CUSTOM.value:
            raise CustomTacticError("战术类型不支持")
        return template
