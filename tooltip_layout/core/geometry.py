# tooltip_layout/core/geometry.py
"""
Geometry helpers: ellipse/rectangle overlap predicates, canvas bounds check,
ellipse boundary points, hit testing, and shapely outlines for metrics and rendering.
"""

from __future__ import annotations

import math

import numpy as np
from shapely import affinity
from shapely.geometry import Point, Polygon, box

from tooltip_layout.core.config import (
    BOUNDS_MODE,
    BOUNDS_MODE_LEGACY,
    BOUNDS_MODE_SYMMETRIC,
    ELLIPSE_OUTLINE_POINTS,
)
from tooltip_layout.core.types import Ellipse, LabelRect


def ellipse_overlaps_rect(ellipse: Ellipse, rect: LabelRect) -> bool:
    """
    Clamp the ellipse center into the rectangle to get the rectangle point closest
    to it, then test that point against (dx/rx)^2 + (dy/ry)^2 <= 1.
    A point on the ellipse boundary counts as overlap.
    """
    closest_x = max(rect.l, min(ellipse.cx, rect.r))
    closest_y = max(rect.t, min(ellipse.cy, rect.b))
    norm_x = (closest_x - ellipse.cx) / ellipse.rx
    norm_y = (closest_y - ellipse.cy) / ellipse.ry
    return norm_x * norm_x + norm_y * norm_y <= 1.0


def rects_overlap(a: LabelRect, b: LabelRect) -> bool:
    """Axis-aligned overlap. Touching edges count as overlapping."""
    if a.r < b.l or b.r < a.l:
        return False
    if a.b < b.t or b.b < a.t:
        return False
    return True


def rect_in_bounds(
    rect: LabelRect,
    max_width: float,
    max_height: float,
    mode: str = BOUNDS_MODE,
) -> bool:
    """
    True if rect lies inside [0, max_width) x [0, max_height).
    mode "legacy" reproduces the older check that compared the bottom edge
    against 0 and the top edge against max_height.
    """
    if mode == BOUNDS_MODE_SYMMETRIC:
        return rect.l >= 0 and rect.r < max_width and rect.t >= 0 and rect.b < max_height
    if mode == BOUNDS_MODE_LEGACY:
        return rect.l >= 0 and rect.r < max_width and rect.b >= 0 and rect.t < max_height
    raise ValueError(f"Unknown bounds mode: {mode!r}")


def ellipse_radius_at(ellipse: Ellipse, theta: float) -> float:
    """Polar radius r(theta) = rx*ry / sqrt((ry cos)^2 + (rx sin)^2)."""
    a = ellipse.rx
    b = ellipse.ry
    return a * b / math.sqrt((b * math.cos(theta)) ** 2 + (a * math.sin(theta)) ** 2)


def ellipse_boundary_point(ellipse: Ellipse, theta: float) -> tuple[float, float]:
    """Point on the ellipse boundary in direction theta (radians) from the center."""
    r = ellipse_radius_at(ellipse, theta)
    return (ellipse.cx + r * math.cos(theta), ellipse.cy + r * math.sin(theta))


def point_in_ellipse(ellipse: Ellipse, x: float, y: float) -> bool:
    """True if (x, y) is inside or on the ellipse."""
    dx = x - ellipse.cx
    dy = y - ellipse.cy
    return (dx * dx) / (ellipse.rx * ellipse.rx) + (dy * dy) / (ellipse.ry * ellipse.ry) <= 1.0


def ellipse_outline(ellipse: Ellipse, n: int = ELLIPSE_OUTLINE_POINTS) -> np.ndarray:
    """Closed outline of the ellipse as an (n + 1, 2) array; first vertex repeated last."""
    theta = np.linspace(0.0, 2.0 * np.pi, n + 1)
    xs = ellipse.cx + ellipse.rx * np.cos(theta)
    ys = ellipse.cy + ellipse.ry * np.sin(theta)
    return np.column_stack([xs, ys])


def ellipse_polygon(ellipse: Ellipse, resolution: int = ELLIPSE_OUTLINE_POINTS // 4) -> Polygon:
    """Ellipse as a shapely polygon: unit circle buffer scaled by (rx, ry)."""
    circle = Point(ellipse.cx, ellipse.cy).buffer(1.0, resolution=resolution)
    return affinity.scale(circle, xfact=ellipse.rx, yfact=ellipse.ry, origin=(ellipse.cx, ellipse.cy))


def rect_polygon(rect: LabelRect) -> Polygon:
    """Label rectangle as a shapely box."""
    return box(rect.l, rect.t, rect.r, rect.b)


def rect_gap_to_ellipse(rect: LabelRect, ellipse: Ellipse) -> float:
    """Distance between a label rectangle and an ellipse outline; 0 when they touch or overlap."""
    return float(rect_polygon(rect).distance(ellipse_polygon(ellipse)))
