# tooltip_layout/core/layout.py
"""
Tooltip layout entry points: validate input, generate candidates per ellipse,
search for a pairwise non-overlapping choice. Each call is independent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from tooltip_layout.core.candidates import generate_all_candidates
from tooltip_layout.core.config import (
    BOUNDS_MODE,
    CIRCLE_SEGMENTS,
    DEFAULT_LABEL_HEIGHT,
    DEFAULT_LABEL_WIDTH,
    SEARCH_MAX_EXPANSIONS,
    SLIDE_SEGMENTS,
)
from tooltip_layout.core.error_codes import NO_FEASIBLE_LAYOUT, user_message
from tooltip_layout.core.io import MaskImage
from tooltip_layout.core.scaling import fit_canvas, scale_ellipses
from tooltip_layout.core.search import search_placement
from tooltip_layout.core.types import Ellipse, LabelRect, LayoutResult
from tooltip_layout.core.validate import validate_canvas, validate_ellipses

logger = logging.getLogger(__name__)


def layout_labels(
    ellipses: Sequence[Ellipse | Mapping[str, Any]],
    max_width: float,
    max_height: float,
    circle_segments: int = CIRCLE_SEGMENTS,
    slide_segments: int = SLIDE_SEGMENTS,
    bounds_mode: str = BOUNDS_MODE,
    max_expansions: int | None = SEARCH_MAX_EXPANSIONS,
) -> LayoutResult:
    """
    Place one label per ellipse. Returns LayoutResult with status:
    placed (one rect per ellipse), empty_input (no ellipses, nothing to place)
    or infeasible (no collision-free choice exists; rects is empty).
    Raises DegenerateEllipseError / InvalidCanvasBoundsError on bad input.
    """
    validate_canvas(max_width, max_height)
    checked = validate_ellipses(ellipses)

    if not checked:
        return LayoutResult(rects=[], status="empty_input")

    candidates = generate_all_candidates(
        checked, max_width, max_height,
        circle_segments=circle_segments,
        slide_segments=slide_segments,
        bounds_mode=bounds_mode,
    )
    counts = [len(c) for c in candidates]
    warnings: list[str] = []
    starved = [i for i, c in enumerate(counts) if c == 0]
    if starved:
        # An ellipse with no candidate makes the whole layout infeasible; skip the search.
        warnings.append(f"No candidate fits for ellipse(s): {', '.join(str(i) for i in starved)}.")
        warnings.append(user_message(NO_FEASIBLE_LAYOUT))
        logger.warning(f"Layout infeasible: ellipses without candidates {starved}")
        return LayoutResult(rects=[], status="infeasible", candidate_counts=counts, warnings=warnings)

    outcome = search_placement(candidates, max_expansions=max_expansions)
    if outcome.status == "found":
        return LayoutResult(
            rects=list(outcome.rects),
            status="placed",
            candidate_counts=counts,
            expansions=outcome.expansions,
        )

    warnings.append(user_message(NO_FEASIBLE_LAYOUT))
    logger.warning(f"Layout infeasible for {len(checked)} ellipses after {outcome.expansions} expansions")
    return LayoutResult(
        rects=[],
        status="infeasible",
        candidate_counts=counts,
        expansions=outcome.expansions,
        warnings=warnings,
    )


def layout_tooltips(
    ellipses: Sequence[Ellipse | Mapping[str, Any]],
    max_width: float,
    max_height: float,
) -> list[LabelRect]:
    """
    One label rect per ellipse, index-aligned with the input, or [] when no layout
    exists (or there are no ellipses). Use layout_labels to tell those apart.
    """
    return layout_labels(ellipses, max_width, max_height).rects


@dataclass
class MaskLayout:
    """Layout of one mask on a canvas: scaled ellipses plus the layout result."""
    ellipses: list[Ellipse]
    result: LayoutResult
    canvas_width: float
    canvas_height: float


def layout_mask(
    mask: MaskImage,
    canvas_height: float,
    label_size: tuple[float, float] | None = (DEFAULT_LABEL_WIDTH, DEFAULT_LABEL_HEIGHT),
    bounds_mode: str = BOUNDS_MODE,
    max_expansions: int | None = SEARCH_MAX_EXPANSIONS,
) -> MaskLayout:
    """Fit the mask image to canvas_height, scale its ellipses and lay out their labels."""
    canvas_width, canvas_h, scale = fit_canvas(mask.width, mask.height, canvas_height)
    scaled = scale_ellipses(mask.ellipses, scale, label_size=label_size)
    result = layout_labels(
        scaled, canvas_width, canvas_h,
        bounds_mode=bounds_mode,
        max_expansions=max_expansions,
    )
    return MaskLayout(ellipses=scaled, result=result, canvas_width=canvas_width, canvas_height=canvas_h)
