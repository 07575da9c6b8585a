"""
Guess hit-testing: match click positions to the regions they land in.
"""

from __future__ import annotations

from typing import Sequence

from tooltip_layout.core.geometry import point_in_ellipse
from tooltip_layout.core.types import Ellipse


def match_guesses(
    ellipses: Sequence[Ellipse],
    guesses: Sequence[tuple[float, float]],
) -> list[int | None]:
    """
    For each guess in order, find the first ellipse containing it and record the
    guess index on that ellipse. Returns one entry per ellipse: the index of the
    last guess that hit it, or None.
    """
    matched: list[int | None] = [None] * len(ellipses)
    for i_guess, (x, y) in enumerate(guesses):
        for i, ellipse in enumerate(ellipses):
            if point_in_ellipse(ellipse, x, y):
                matched[i] = i_guess
                break
    return matched


def count_found(matched: Sequence[int | None]) -> int:
    """Number of ellipses hit by at least one guess."""
    return sum(1 for m in matched if m is not None)


def parse_guesses(s: str) -> list[tuple[float, float]]:
    """Parse 'x,y;x,y' (canvas px). Empty string gives no guesses. Raises ValueError."""
    out: list[tuple[float, float]] = []
    for part in (s or "").split(";"):
        part = part.strip()
        if not part:
            continue
        xy = part.split(",")
        if len(xy) != 2:
            raise ValueError(f"Guess must look like X,Y, got {part!r}")
        out.append((float(xy[0]), float(xy[1])))
    return out
