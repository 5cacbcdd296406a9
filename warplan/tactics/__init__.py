"""
Tactic engine: rank expressions, placeholder texts, template and static policies.
Pure computation; the only I/O is one template store read per allocation.
"""
from .allocation import HIGH_DEMAND_LIMIT, TacticAllocator, UnsupportedTacticError, allocate_tactic
from .rank_expression import parse_rank_expressions
from .placeholders import replace_rank_placeholders, names_for_ranks
from .resolver import TemplateResolution, TemplateResolver, TemplateStore
from .schemas import GroupConfig, TemplateConfig
from .static_policies import STATIC_POLICIES, StaticPolicy, list_static_tactics

__all__ = [
    "HIGH_DEMAND_LIMIT",
    "TacticAllocator",
    "UnsupportedTacticError",
    "allocate_tactic",
    "parse_rank_expressions",
    "replace_rank_placeholders",
    "names_for_ranks",
    "TemplateResolution",
    "TemplateResolver",
    "TemplateStore",
    "GroupConfig",
    "TemplateConfig",
    "STATIC_POLICIES",
    "StaticPolicy",
    "list_static_tactics",
]
