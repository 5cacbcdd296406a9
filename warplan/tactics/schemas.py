"""
Template model: the stored JSON body of a tactic.

{"groups": [{"name": "...", "task": "...", "ranks": ["1", "3-5"]}]}
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GroupConfig(BaseModel):
    """One declared group. name and task may carry rank placeholders."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(None, description="Group name template, e.g. '兵器坊（车头：1）'")
    task: str | None = Field(None, description="Task template with rank placeholders")
    ranks: list[str | None] | None = Field(None, description="Rank expressions such as '1', '1-3', '10,12'")

    @field_validator("name", "task", mode="before")
    @classmethod
    def numbers_as_text(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("ranks", mode="before")
    @classmethod
    def ranks_as_text(cls, value):
        # Editors sometimes store bare numbers: [1, "3-5"]; other entries are
        # dropped to None so one bad entry never rejects the template.
        if isinstance(value, list):
            return [
                v if isinstance(v, str)
                else str(v) if isinstance(v, int) and not isinstance(v, bool)
                else None
                for v in value
            ]
        return value


class TemplateConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    groups: list[GroupConfig] | None = None

    @property
    def is_empty(self) -> bool:
        return not self.groups


def decode_template(raw_json: str) -> TemplateConfig:
    """Default decoder: raises pydantic.ValidationError on malformed bodies."""
    return TemplateConfig.model_validate_json(raw_json)


def encode_template(config: TemplateConfig) -> str:
    return config.model_dump_json()
