"""
Deterministic tests for geometry: ellipse/rect overlap, rect/rect overlap,
bounds modes, boundary points, hit testing, shapely outlines.
"""

from __future__ import annotations

import math

import pytest

from tooltip_layout.core.geometry import (
    ellipse_boundary_point,
    ellipse_outline,
    ellipse_overlaps_rect,
    ellipse_polygon,
    point_in_ellipse,
    rect_gap_to_ellipse,
    rect_in_bounds,
    rects_overlap,
)
from tooltip_layout.core.types import Ellipse, LabelRect


def _ellipse(cx: float = 0.0, cy: float = 0.0, rx: float = 10.0, ry: float = 5.0) -> Ellipse:
    return Ellipse(cx=cx, cy=cy, rx=rx, ry=ry, rect_width=4.0, rect_height=2.0)


def test_ellipse_overlaps_rect_containing_center() -> None:
    assert ellipse_overlaps_rect(_ellipse(), LabelRect(1, 1, 4, 2, 0)) is True


def test_ellipse_overlaps_rect_far_away() -> None:
    assert ellipse_overlaps_rect(_ellipse(), LabelRect(50, 50, 4, 2, 0)) is False


def test_ellipse_overlaps_rect_touching_boundary_counts() -> None:
    # Rect left edge at x=10 touches the ellipse at (10, 0)
    rect = LabelRect(12, 0, 4, 2, 0)
    assert rect.l == 10
    assert ellipse_overlaps_rect(_ellipse(), rect) is True
    assert ellipse_overlaps_rect(_ellipse(), LabelRect(12.5, 0, 4, 2, 0)) is False


def test_ellipse_overlaps_rect_near_corner_miss() -> None:
    circle = _ellipse(rx=10, ry=10)
    # Rect corner (7.1, 7.1) lies just outside the circle of radius 10
    assert ellipse_overlaps_rect(circle, LabelRect(9.1, 9.1, 4, 4, 0)) is False
    assert ellipse_overlaps_rect(circle, LabelRect(8.9, 8.9, 4, 4, 0)) is True


def test_rects_overlap_touching_edges() -> None:
    a = LabelRect(0, 0, 2, 2, 0)
    b = LabelRect(2, 0, 2, 2, 0)
    assert rects_overlap(a, b) is True
    assert rects_overlap(b, a) is True


def test_rects_overlap_separated() -> None:
    a = LabelRect(0, 0, 2, 2, 0)
    assert rects_overlap(a, LabelRect(2.01, 0, 2, 2, 0)) is False
    assert rects_overlap(a, LabelRect(0, 2.01, 2, 2, 0)) is False
    assert rects_overlap(a, LabelRect(0.5, 0.5, 2, 2, 0)) is True


def test_rect_in_bounds_symmetric() -> None:
    assert rect_in_bounds(LabelRect(5, 50, 10, 20, 0), 100, 100, mode="symmetric") is True  # l == 0 allowed
    assert rect_in_bounds(LabelRect(95, 50, 10, 20, 0), 100, 100, mode="symmetric") is False  # r == W rejected
    assert rect_in_bounds(LabelRect(50, 5, 10, 20, 0), 100, 100, mode="symmetric") is False  # t < 0
    assert rect_in_bounds(LabelRect(50, 95, 10, 20, 0), 100, 100, mode="symmetric") is False  # b > H


def test_rect_in_bounds_legacy_checks_bottom_against_zero() -> None:
    # Legacy compares the bottom edge with 0 and the top edge with H, so rects
    # poking over the top or bottom of the canvas pass.
    assert rect_in_bounds(LabelRect(50, 5, 10, 20, 0), 100, 100, mode="legacy") is True
    assert rect_in_bounds(LabelRect(50, 95, 10, 20, 0), 100, 100, mode="legacy") is True
    assert rect_in_bounds(LabelRect(50, -15, 10, 20, 0), 100, 100, mode="legacy") is False
    assert rect_in_bounds(LabelRect(95, 50, 10, 20, 0), 100, 100, mode="legacy") is False


def test_rect_in_bounds_unknown_mode() -> None:
    with pytest.raises(ValueError):
        rect_in_bounds(LabelRect(50, 50, 10, 10, 0), 100, 100, mode="sideways")


def test_ellipse_boundary_point_axes() -> None:
    e = _ellipse(cx=3, cy=4, rx=10, ry=5)
    x, y = ellipse_boundary_point(e, 0.0)
    assert x == pytest.approx(13) and y == pytest.approx(4)
    x, y = ellipse_boundary_point(e, math.pi / 2)
    assert x == pytest.approx(3) and y == pytest.approx(9)


def test_ellipse_boundary_point_on_ellipse() -> None:
    e = _ellipse(cx=100, cy=150, rx=50, ry=30)
    for k in range(32):
        x, y = ellipse_boundary_point(e, k * math.pi / 16)
        value = ((x - e.cx) / e.rx) ** 2 + ((y - e.cy) / e.ry) ** 2
        assert value == pytest.approx(1.0)


def test_point_in_ellipse() -> None:
    e = _ellipse()
    assert point_in_ellipse(e, 0, 0) is True
    assert point_in_ellipse(e, 10, 0) is True
    assert point_in_ellipse(e, 0, 5.01) is False


def test_ellipse_outline_closed() -> None:
    xy = ellipse_outline(_ellipse(), n=32)
    assert xy.shape == (33, 2)
    assert xy[0][0] == pytest.approx(xy[-1][0])
    assert xy[0][1] == pytest.approx(xy[-1][1])


def test_ellipse_polygon_area() -> None:
    e = _ellipse(rx=20, ry=10)
    poly = ellipse_polygon(e)
    assert poly.is_valid
    assert poly.area == pytest.approx(math.pi * 20 * 10, rel=0.01)


def test_rect_gap_to_ellipse() -> None:
    e = _ellipse(rx=10, ry=5)
    # Flush against the top of the ellipse
    assert rect_gap_to_ellipse(LabelRect(0, -6, 4, 2, 0), e) == pytest.approx(0.0, abs=0.05)
    # 10 units right of the rightmost point
    assert rect_gap_to_ellipse(LabelRect(22, 0, 4, 2, 0), e) == pytest.approx(10.0, abs=0.05)
