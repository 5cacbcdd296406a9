"""
Rank placeholder substitution for tactic texts.

A template task such as "官渡开放后：2,5,10 去霹雳车" becomes
"官渡开放后：甲,乙,丙 去霹雳车" once ranks 2, 5 and 10 are known.
Ranks with no participant stay as their number.
"""
from __future__ import annotations

import re
from typing import Iterable, Sequence

from warplan.models import Participant
from warplan.tactics.rank_expression import parse_rank_expressions

# Maximal rank expression not glued to other digits: "1", "3-5", "1,3-5,10"
# ASCII digits only: full-width "１" in Chinese text is not a placeholder.
RANK_EXPR = re.compile(r"(?<!\d)(\d+(?:-\d+)?(?:,\d+(?:-\d+)?)*)(?!\d)", re.ASCII)


def name_for_rank(participants: Sequence[Participant], rank: int) -> str:
    idx = rank - 1
    if 0 <= idx < len(participants):
        name = participants[idx].name
        if name:
            return name
    return str(rank)


def names_for_ranks(participants: Sequence[Participant], ranks: Iterable[int]) -> str:
    """Comma-joined display names for ranks; out-of-range ranks keep their number."""
    return ",".join(name_for_rank(participants, r) for r in ranks)


def replace_rank_placeholders(text: str | None, participants: Sequence[Participant]) -> str | None:
    """
    Replace every rank expression in text with the matching participant names.
    Returns text unchanged when it is empty or there are no participants.
    """
    if not text or not participants:
        return text

    def _substitute_term(term: str) -> str:
        ranks = parse_rank_expressions([term])
        # Terms the parser drops (oversized ranges such as dates) stay as written
        return names_for_ranks(participants, ranks) if ranks else term

    def _substitute(match: re.Match[str]) -> str:
        return ",".join(_substitute_term(term) for term in match.group(1).split(","))

    # A callable replacement is inserted verbatim, so names containing
    # backslashes or group references are never expanded.
    return RANK_EXPR.sub(_substitute, text)
