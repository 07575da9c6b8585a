"""
Input validation (fail fast on degenerate ellipses and canvas bounds) and
placement checks: bounds, clearance from other ellipses, pairwise overlap, length.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Sequence

from tooltip_layout.core.config import BOUNDS_MODE
from tooltip_layout.core.error_codes import DegenerateEllipseError, InvalidCanvasBoundsError
from tooltip_layout.core.geometry import ellipse_overlaps_rect, rect_in_bounds, rects_overlap
from tooltip_layout.core.types import Ellipse, LabelRect


def _as_ellipse(index: int, item: Ellipse | Mapping[str, Any]) -> Ellipse:
    if isinstance(item, Ellipse):
        return item
    try:
        return Ellipse.from_record(item)
    except (KeyError, TypeError, ValueError) as e:
        raise DegenerateEllipseError(index, f"unreadable record ({e})") from e


def validate_ellipses(ellipses: Sequence[Ellipse | Mapping[str, Any]]) -> list[Ellipse]:
    """
    Coerce records to Ellipse and check them. Raises DegenerateEllipseError for a
    non-finite field or a non-positive radius or label dimension.
    """
    out: list[Ellipse] = []
    for i, item in enumerate(ellipses):
        e = _as_ellipse(i, item)
        for name in ("cx", "cy", "rx", "ry", "rect_width", "rect_height"):
            value = getattr(e, name)
            if not math.isfinite(value):
                raise DegenerateEllipseError(i, f"{name} is not finite ({value!r})")
        for name in ("rx", "ry", "rect_width", "rect_height"):
            value = getattr(e, name)
            if value <= 0:
                raise DegenerateEllipseError(i, f"{name} must be > 0, got {value!r}")
        out.append(e)
    return out


def validate_canvas(max_width: float, max_height: float) -> None:
    """Raise InvalidCanvasBoundsError unless both bounds are positive and finite."""
    for value in (max_width, max_height):
        try:
            v = float(value)
        except (TypeError, ValueError) as e:
            raise InvalidCanvasBoundsError(max_width, max_height) from e
        if not math.isfinite(v) or v <= 0:
            raise InvalidCanvasBoundsError(max_width, max_height)


def validate_placement(
    ellipses: Sequence[Ellipse],
    rects: Sequence[LabelRect],
    max_width: float,
    max_height: float,
    bounds_mode: str = BOUNDS_MODE,
) -> tuple[bool, list[str]]:
    """
    Check a placement: length 0 or one rect per ellipse, every rect inside the canvas,
    clear of every ellipse but its own, and no two rects overlapping.
    Returns (ok, violations).
    """
    violations: list[str] = []
    if len(rects) == 0:
        return True, violations
    if len(rects) != len(ellipses):
        violations.append(f"Placement has {len(rects)} rects for {len(ellipses)} ellipses.")
        return False, violations

    for i, rect in enumerate(rects):
        if not rect_in_bounds(rect, max_width, max_height, mode=bounds_mode):
            violations.append(f"Rect {i} is outside the canvas.")
        for j, ellipse in enumerate(ellipses):
            if j != i and ellipse_overlaps_rect(ellipse, rect):
                violations.append(f"Rect {i} overlaps ellipse {j}.")
    for i in range(len(rects)):
        for j in range(i + 1, len(rects)):
            if rects_overlap(rects[i], rects[j]):
                violations.append(f"Rects {i} and {j} overlap.")
    return not violations, violations
