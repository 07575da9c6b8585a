"""
Placement search on hand-built candidate lists: trivial case, LIFO order,
backtracking, exhaustion, expansion budget.
"""

from __future__ import annotations

import pytest

from tooltip_layout.core.error_codes import SearchBudgetExceededError
from tooltip_layout.core.search import search_placement
from tooltip_layout.core.types import LabelRect

A1 = LabelRect(0, 0, 2, 2, 0)
A2 = LabelRect(10, 0, 2, 2, 1)
B1 = LabelRect(10, 1.5, 2, 2, 2)  # overlaps A2 only


def test_no_lists_is_trivially_found() -> None:
    out = search_placement([])
    assert out.status == "found"
    assert out.trivial is True
    assert out.rects == []
    assert out.expansions == 0


def test_later_candidates_explored_first() -> None:
    out = search_placement([[A1, A2]])
    assert out.status == "found"
    assert out.rects == [A2]


def test_backtracks_past_conflicting_choice() -> None:
    out = search_placement([[A1, A2], [B1]])
    assert out.status == "found"
    assert out.rects == [A1, B1]
    # [], [A2], [A1], [A1, B1]
    assert out.expansions == 4


def test_exhausted_when_every_pair_overlaps() -> None:
    out = search_placement([[A2], [B1]])
    assert out.status == "exhausted"
    assert out.rects == []
    assert out.trivial is False


def test_exhausted_when_a_list_is_empty() -> None:
    out = search_placement([[A1], []])
    assert out.status == "exhausted"
    assert out.rects == []


def test_budget_exceeded_raises() -> None:
    with pytest.raises(SearchBudgetExceededError) as info:
        search_placement([[A1, A2], [B1]], max_expansions=1)
    assert info.value.error_key == "search_budget_exceeded"


def test_budget_large_enough() -> None:
    out = search_placement([[A1, A2], [B1]], max_expansions=4)
    assert out.rects == [A1, B1]


def test_result_is_pairwise_clear() -> None:
    lists = [
        [LabelRect(0, 0, 4, 4, 0), LabelRect(20, 0, 4, 4, 0)],
        [LabelRect(1, 1, 4, 4, 0), LabelRect(20, 2, 4, 4, 0), LabelRect(40, 0, 4, 4, 0)],
        [LabelRect(40, 1, 4, 4, 0), LabelRect(0, 20, 4, 4, 0)],
    ]
    out = search_placement(lists)
    assert out.status == "found"
    assert len(out.rects) == 3
    for i in range(3):
        for j in range(i + 1, 3):
            r1, r2 = out.rects[i], out.rects[j]
            assert r1.r < r2.l or r2.r < r1.l or r1.b < r2.t or r2.b < r1.t
