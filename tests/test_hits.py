"""
Guess matching against regions.
"""

from __future__ import annotations

import pytest

from tooltip_layout.core.hits import count_found, match_guesses, parse_guesses
from tooltip_layout.core.types import Ellipse

ELLIPSES = [
    Ellipse(cx=0, cy=0, rx=10, ry=5, rect_width=1, rect_height=1),
    Ellipse(cx=5, cy=0, rx=10, ry=5, rect_width=1, rect_height=1),
    Ellipse(cx=100, cy=100, rx=3, ry=3, rect_width=1, rect_height=1),
]


def test_first_containing_ellipse_takes_the_guess() -> None:
    # (4, 0) is inside both overlapping ellipses; only the first records it
    matched = match_guesses(ELLIPSES, [(4, 0), (14, 0), (50, 50)])
    assert matched == [0, 1, None]
    assert count_found(matched) == 2


def test_boundary_counts_as_hit_and_later_guess_wins() -> None:
    matched = match_guesses(ELLIPSES, [(103, 100), (100, 100)])
    assert matched[2] == 1


def test_no_guesses() -> None:
    assert match_guesses(ELLIPSES, []) == [None, None, None]
    assert count_found([]) == 0


def test_parse_guesses() -> None:
    assert parse_guesses("1,2; 3.5 ,4") == [(1.0, 2.0), (3.5, 4.0)]
    assert parse_guesses("") == []
    with pytest.raises(ValueError):
        parse_guesses("1,2,3")
    with pytest.raises(ValueError):
        parse_guesses("a,b")
