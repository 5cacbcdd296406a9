"""
Tests for rank placeholder substitution in tactic texts.
"""
from __future__ import annotations

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from warplan.models import Participant
from warplan.tactics.placeholders import names_for_ranks, replace_rank_placeholders


def _accounts(n: int) -> list[Participant]:
    return Participant.rank_list((i, f"账号{i}") for i in range(1, n + 1))


def test_replaces_single_rank():
    assert replace_rank_placeholders("兵器坊（车头：1）", _accounts(3)) == "兵器坊（车头：账号1）"


def test_replaces_lists_and_ranges():
    text = "1,3-5 去乌巢，2 去敖仓"
    assert replace_rank_placeholders(text, _accounts(5)) == "账号1,账号3,账号4,账号5 去乌巢，账号2 去敖仓"


def test_out_of_range_rank_keeps_number():
    assert replace_rank_placeholders("4-6 去黎阳", _accounts(4)) == "账号4,5,6 去黎阳"


def test_multi_digit_token_is_one_rank():
    """'12' is rank 12, never rank 1 followed by 2."""
    assert replace_rank_placeholders("第12组", _accounts(5)) == "第12组"
    assert replace_rank_placeholders("第12组", _accounts(12)) == "第账号12组"


def test_empty_text_or_no_participants_unchanged():
    assert replace_rank_placeholders("", _accounts(3)) == ""
    assert replace_rank_placeholders(None, _accounts(3)) is None
    assert replace_rank_placeholders("1-3 抢官渡", []) == "1-3 抢官渡"


def test_replacement_is_literal():
    accounts = Participant.rank_list([(1, r"a\1b"), (2, r"\g<0>$1")])
    assert replace_rank_placeholders("1 和 2", accounts) == r"a\1b 和 \g<0>$1"


def test_names_for_ranks():
    accounts = _accounts(3)
    assert names_for_ranks(accounts, [3, 1, 9]) == "账号3,账号1,9"
    assert names_for_ranks(accounts, []) == ""


def test_blank_display_name_falls_back_to_rank():
    accounts = Participant.rank_list([(1, ""), (2, "乙")])
    assert names_for_ranks(accounts, [1, 2]) == "1,乙"


def test_non_ascii_digits_are_plain_text():
    assert replace_rank_placeholders("第１波 ٢ 去乌巢", _accounts(3)) == "第１波 ٢ 去乌巢"


def test_date_like_range_is_kept_as_written():
    accounts = _accounts(3)
    assert replace_rank_placeholders("20240101-20241231 截止", accounts) == "20240101-20241231 截止"
    assert replace_rank_placeholders("1,20240101-20241231", accounts) == "账号1,20240101-20241231"
