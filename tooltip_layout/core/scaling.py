"""
Canvas sizing and ellipse scaling: fit the mask image to a canvas height,
scale regions into canvas units while label size stays fixed on screen.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from tooltip_layout.core.config import (
    CANVAS_HEIGHT_FRACTION,
    DEFAULT_LABEL_HEIGHT,
    DEFAULT_LABEL_WIDTH,
)
from tooltip_layout.core.types import Ellipse


def parse_size(s: str) -> tuple[float, float]:
    """Parse 'WxH' (e.g. '150x100'). Raises ValueError when malformed or non-positive."""
    parts = (s or "").lower().replace(" ", "").split("x")
    if len(parts) != 2:
        raise ValueError(f"Size must look like WIDTHxHEIGHT, got {s!r}")
    try:
        w, h = float(parts[0]), float(parts[1])
    except ValueError as e:
        raise ValueError(f"Size must look like WIDTHxHEIGHT, got {s!r}") from e
    if w <= 0 or h <= 0:
        raise ValueError(f"Size must be positive, got {s!r}")
    return (w, h)


def canvas_height_for_viewport(viewport_height: float, fraction: float = CANVAS_HEIGHT_FRACTION) -> float:
    """Canvas height as a fraction of the viewport."""
    return viewport_height * fraction


def fit_canvas(image_width: float, image_height: float, canvas_height: float) -> tuple[float, float, float]:
    """
    Return (canvas_width, canvas_height, scale) keeping the image aspect ratio.
    scale maps image pixels to canvas pixels.
    """
    if image_width <= 0 or image_height <= 0:
        raise ValueError(f"Image size must be positive, got {image_width}x{image_height}")
    canvas_width = canvas_height * (image_width / image_height)
    scale = canvas_width / image_width
    return (canvas_width, canvas_height, scale)


def scale_ellipses(
    ellipses: Sequence[Ellipse],
    scale: float,
    label_size: tuple[float, float] | None = (DEFAULT_LABEL_WIDTH, DEFAULT_LABEL_HEIGHT),
) -> list[Ellipse]:
    """
    Scale centers and radii by scale. Label size is set to label_size as given
    (canvas units); pass None to keep each ellipse's own label size unscaled.
    """
    out: list[Ellipse] = []
    for e in ellipses:
        scaled = replace(e, cx=e.cx * scale, cy=e.cy * scale, rx=e.rx * scale, ry=e.ry * scale)
        if label_size is not None:
            scaled = replace(scaled, rect_width=float(label_size[0]), rect_height=float(label_size[1]))
        out.append(scaled)
    return out
