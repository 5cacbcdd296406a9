"""
Service layer: template management around the tactic engine.
Allocation itself lives in warplan.tactics; services only orchestrate persistence.
"""
from .custom_tactic_service import (
    CustomTacticService,
    CustomTacticError,
    CustomTacticDetail,
    build_tactic_key,
)

__all__ = [
    "CustomTacticService",
    "CustomTacticError",
    "CustomTacticDetail",
    "build_tactic_key",
]
