"""
Rank expressions: "1", "3-5", "1,3-5,10".

Grammar: list := term (',' term)*, term := INT | INT '-' INT.
Parsing is best effort: a malformed term is skipped on its own and never
aborts the rest of the expression. Only ASCII digits count as INT.
"""
from __future__ import annotations

import re
from typing import Iterable

# Ranges wider than this are treated as malformed (e.g. date-like "20240101-20241231")
MAX_RANGE_SPAN = 1000

_INT = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _parse_int(text: str) -> int | None:
    text = text.strip()
    if not _INT.fullmatch(text):
        return None
    return int(text)


def _expand_range(part: str) -> list[int]:
    """Inclusive span in either direction; [] if an endpoint is not an integer or the span is too wide."""
    pieces = part.split("-")
    if len(pieces) < 2:
        return []
    start, end = _parse_int(pieces[0]), _parse_int(pieces[1])
    if start is None or end is None or abs(end - start) >= MAX_RANGE_SPAN:
        return []
    step = 1 if start <= end else -1
    return list(range(start, end + step, step))


def parse_rank_expressions(expressions: Iterable[str | None] | None) -> list[int]:
    """
    Expand rank expressions into 1-based ranks, in encounter order.
    Duplicates are kept; callers decide how to treat them.

    >>> parse_rank_expressions(["1-3", "5", "7-6"])
    [1, 2, 3, 5, 7, 6]
    """
    result: list[int] = []
    if not expressions:
        return result
    for expr in expressions:
        if expr is None:
            continue
        for part in str(expr).split(","):
            part = part.strip()
            if not part:
                continue
            if "-" in part:
                result.extend(_expand_range(part))
                continue
            rank = _parse_int(part)
            if rank is not None:
                result.append(rank)
    return result
