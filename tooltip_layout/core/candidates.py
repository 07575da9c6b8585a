# tooltip_layout/core/candidates.py
"""
Label candidates around each ellipse: slides along the four cardinal sides of the
bounding box, plus rectangles anchored by a corner to boundary points at the
remaining angles. Candidates outside the canvas or touching another ellipse are dropped.
"""

from __future__ import annotations

import logging
import math
from typing import Iterator, Sequence

from tooltip_layout.core.config import BOUNDS_MODE, CIRCLE_SEGMENTS, SLIDE_SEGMENTS
from tooltip_layout.core.geometry import (
    ellipse_boundary_point,
    ellipse_overlaps_rect,
    rect_in_bounds,
)
from tooltip_layout.core.types import Ellipse, LabelRect

logger = logging.getLogger(__name__)

TAG_TOP = 0
TAG_RIGHT = 1
TAG_BOTTOM = 2
TAG_LEFT = 3
TAG_CORNER_LOWER_RIGHT = 4
TAG_CORNER_UPPER_RIGHT = 5
TAG_CORNER_LOWER_LEFT = 6
TAG_CORNER_UPPER_LEFT = 7


def max_candidates(
    circle_segments: int = CIRCLE_SEGMENTS,
    slide_segments: int = SLIDE_SEGMENTS,
) -> int:
    """Most candidates a single ellipse can yield."""
    return 4 * slide_segments + (circle_segments - 4)


def _check_resolution(circle_segments: int, slide_segments: int) -> None:
    if circle_segments <= 0 or circle_segments % 4 != 0:
        raise ValueError(f"circle_segments must be a positive multiple of 4, got {circle_segments}")
    if slide_segments < 1:
        raise ValueError(f"slide_segments must be >= 1, got {slide_segments}")


def _side_slides(ellipse: Ellipse, quarter: int, slide_segments: int) -> Iterator[LabelRect]:
    """Rectangles flush against one side of the ellipse bounding box, sliding along it."""
    w = ellipse.rect_width
    h = ellipse.rect_height
    for slide in range(slide_segments):
        dx = slide * w / slide_segments - w / 2.0
        dy = slide * h / slide_segments - h / 2.0
        if quarter == TAG_TOP:
            yield LabelRect(ellipse.cx + dx, ellipse.cy - ellipse.ry - h / 2.0, w, h, TAG_TOP)
        elif quarter == TAG_RIGHT:
            yield LabelRect(ellipse.cx + ellipse.rx + w / 2.0, ellipse.cy + dy, w, h, TAG_RIGHT)
        elif quarter == TAG_BOTTOM:
            yield LabelRect(ellipse.cx + dx, ellipse.cy + ellipse.ry + h / 2.0, w, h, TAG_BOTTOM)
        else:
            yield LabelRect(ellipse.cx - ellipse.rx - w / 2.0, ellipse.cy + dy, w, h, TAG_LEFT)


def _corner_anchor(ellipse: Ellipse, theta: float) -> LabelRect:
    """
    Rectangle whose corner nearest the ellipse center sits on the boundary point at theta,
    so it extends away from the center on both axes.
    """
    x, y = ellipse_boundary_point(ellipse, theta)
    hw = ellipse.rect_width / 2.0
    hh = ellipse.rect_height / 2.0
    if x > ellipse.cx:
        if y > ellipse.cy:
            return LabelRect(x + hw, y + hh, ellipse.rect_width, ellipse.rect_height, TAG_CORNER_LOWER_RIGHT)
        return LabelRect(x + hw, y - hh, ellipse.rect_width, ellipse.rect_height, TAG_CORNER_UPPER_RIGHT)
    if y > ellipse.cy:
        return LabelRect(x - hw, y + hh, ellipse.rect_width, ellipse.rect_height, TAG_CORNER_LOWER_LEFT)
    return LabelRect(x - hw, y - hh, ellipse.rect_width, ellipse.rect_height, TAG_CORNER_UPPER_LEFT)


def iter_raw_candidates(
    ellipse: Ellipse,
    circle_segments: int = CIRCLE_SEGMENTS,
    slide_segments: int = SLIDE_SEGMENTS,
) -> Iterator[LabelRect]:
    """
    All geometric placements for one ellipse before filtering, in generation order.
    Segments on a quarter boundary expand into side slides (top, right, bottom, left);
    every other segment gives one corner-anchored rectangle.
    """
    _check_resolution(circle_segments, slide_segments)
    step = 2.0 * math.pi / circle_segments
    quarter_size = circle_segments // 4
    for seg in range(circle_segments):
        if seg % quarter_size == 0:
            yield from _side_slides(ellipse, seg // quarter_size, slide_segments)
        else:
            yield _corner_anchor(ellipse, seg * step)


def is_valid_candidate(
    rect: LabelRect,
    owner: int,
    ellipses: Sequence[Ellipse],
    max_width: float,
    max_height: float,
    bounds_mode: str = BOUNDS_MODE,
) -> bool:
    """In bounds and clear of every ellipse except its owner."""
    if not rect_in_bounds(rect, max_width, max_height, mode=bounds_mode):
        return False
    for j, other in enumerate(ellipses):
        if j == owner:
            continue
        if ellipse_overlaps_rect(other, rect):
            return False
    return True


def iter_candidates(
    ellipses: Sequence[Ellipse],
    index: int,
    max_width: float,
    max_height: float,
    circle_segments: int = CIRCLE_SEGMENTS,
    slide_segments: int = SLIDE_SEGMENTS,
    bounds_mode: str = BOUNDS_MODE,
) -> Iterator[LabelRect]:
    """Lazily yield the valid candidates for ellipses[index], in generation order."""
    for rect in iter_raw_candidates(ellipses[index], circle_segments, slide_segments):
        if is_valid_candidate(rect, index, ellipses, max_width, max_height, bounds_mode):
            yield rect


def generate_candidates(
    ellipses: Sequence[Ellipse],
    index: int,
    max_width: float,
    max_height: float,
    circle_segments: int = CIRCLE_SEGMENTS,
    slide_segments: int = SLIDE_SEGMENTS,
    bounds_mode: str = BOUNDS_MODE,
) -> list[LabelRect]:
    """Valid candidates for ellipses[index] as a list."""
    return list(
        iter_candidates(
            ellipses, index, max_width, max_height,
            circle_segments=circle_segments,
            slide_segments=slide_segments,
            bounds_mode=bounds_mode,
        )
    )


def generate_all_candidates(
    ellipses: Sequence[Ellipse],
    max_width: float,
    max_height: float,
    circle_segments: int = CIRCLE_SEGMENTS,
    slide_segments: int = SLIDE_SEGMENTS,
    bounds_mode: str = BOUNDS_MODE,
) -> list[list[LabelRect]]:
    """One candidate list per ellipse, index-aligned with ellipses."""
    out: list[list[LabelRect]] = []
    for i in range(len(ellipses)):
        cands = generate_candidates(
            ellipses, i, max_width, max_height,
            circle_segments=circle_segments,
            slide_segments=slide_segments,
            bounds_mode=bounds_mode,
        )
        logger.debug(f"Ellipse {i}: {len(cands)} candidates")
        out.append(cands)
    return out
