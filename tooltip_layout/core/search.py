# tooltip_layout/core/search.py
"""
Depth-first placement search: choose one candidate per ellipse, in ellipse order,
so that no two chosen rectangles overlap. Iterative, with an explicit stack of
partial assignments; returns the first complete assignment reached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Sequence

from tooltip_layout.core.config import SEARCH_MAX_EXPANSIONS
from tooltip_layout.core.error_codes import SearchBudgetExceededError
from tooltip_layout.core.geometry import rects_overlap
from tooltip_layout.core.types import LabelRect

logger = logging.getLogger(__name__)

SearchStatus = Literal["found", "exhausted"]


@dataclass
class SearchOutcome:
    """Search result. rects holds one rect per candidate list when status is found."""
    status: SearchStatus
    rects: list[LabelRect] = field(default_factory=list)
    expansions: int = 0
    trivial: bool = False


def _fits(candidate: LabelRect, placed: Sequence[LabelRect]) -> bool:
    for existing in placed:
        if rects_overlap(candidate, existing):
            return False
    return True


def search_placement(
    candidates: Sequence[Sequence[LabelRect]],
    max_expansions: int | None = SEARCH_MAX_EXPANSIONS,
) -> SearchOutcome:
    """
    Explicit-stack DFS over prefixes of candidates. Later candidates of a list are
    explored first (LIFO). With no candidate lists the empty assignment is already
    complete and is returned as found (trivial=True).
    Raises SearchBudgetExceededError if max_expansions frames are popped without an answer.
    """
    n = len(candidates)
    if n == 0:
        return SearchOutcome(status="found", rects=[], expansions=0, trivial=True)

    stack: list[list[LabelRect]] = [[]]
    expansions = 0
    while stack:
        current = stack.pop()
        expansions += 1
        if max_expansions is not None and expansions > max_expansions:
            raise SearchBudgetExceededError(max_expansions)

        depth = len(current)
        if depth == n:
            logger.debug(f"Placement found after {expansions} expansions")
            return SearchOutcome(status="found", rects=current, expansions=expansions)

        for candidate in candidates[depth]:
            if _fits(candidate, current):
                stack.append(current + [candidate])

    logger.debug(f"Placement search exhausted after {expansions} expansions")
    return SearchOutcome(status="exhausted", rects=[], expansions=expansions)
