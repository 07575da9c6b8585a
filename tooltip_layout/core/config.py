"""
Central configuration for tooltip label layout.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import logging
import os

logger = logging.getLogger(__name__)

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Candidate generation -----
CIRCLE_SEGMENTS: int = 32
"""Angular resolution around each ellipse. Must be a multiple of 4 (one cardinal side per quarter)."""

SLIDE_SEGMENTS: int = 8
"""Number of positions a label slides through along each cardinal side."""

# ----- Bounds check -----
BOUNDS_MODE_SYMMETRIC: str = "symmetric"
BOUNDS_MODE_LEGACY: str = "legacy"
BOUNDS_MODES: tuple[str, ...] = (BOUNDS_MODE_SYMMETRIC, BOUNDS_MODE_LEGACY)



def bounds_mode_from_env(value: str | None) -> str:
    """Bounds mode named by an env value; unknown values fall back to symmetric with a warning."""
    if not value:
        return BOUNDS_MODE_SYMMETRIC
    mode = value.strip().lower()
    if mode not in BOUNDS_MODES:
        logger.warning(f"Unknown TOOLTIP_BOUNDS_MODE {value!r}; using {BOUNDS_MODE_SYMMETRIC!r}")
        return BOUNDS_MODE_SYMMETRIC
    return mode


BOUNDS_MODE: str = bounds_mode_from_env(os.environ.get("TOOLTIP_BOUNDS_MODE"))
"""
symmetric: l >= 0, r < W, t >= 0, b < H.
legacy: l >= 0, r < W, b >= 0, t < H (bottom tested against 0, top against H).
"""

# ----- Search -----
SEARCH_MAX_EXPANSIONS: int | None = None
"""Max search frames popped before giving up with an error; None for unbounded."""

# ----- Mask loading and canvas scaling -----
IMAGE_SCALE_MULTIPLIER: float = 4.0
"""Mask SVG coordinates are multiplied by this to reach image pixel space."""

DEFAULT_LABEL_WIDTH: float = 150.0
DEFAULT_LABEL_HEIGHT: float = 100.0
"""Label size in canvas pixels; stays fixed when ellipses are scaled."""

CANVAS_HEIGHT_FRACTION: float = 0.8
"""Canvas height as a fraction of the viewport height."""

DEFAULT_VIEWPORT_HEIGHT_PX: int = 1000

# ----- Text metrics -----
DEFAULT_FONT_FAMILY: str = "DejaVu Sans"
DEFAULT_FONT_SIZE_PT: float = 16.0
LABEL_TEXT_PADDING_PT: float = 6.0
"""Padding added on each side of measured text when sizing a label from text."""

DEFAULT_LABEL_TEXT: str = "Some text buddy"

# ----- Rendering -----
RENDER_DPI: int = 100
HIT_COLOR: str = "#00ff00"
MISS_COLOR: str = "#ff0000"
ELLIPSE_LINE_WIDTH: float = 8.0
LABEL_FILL_COLOR: str = "#F0F0FF"
LABEL_TEXT_COLOR: str = "#000000"
ELLIPSE_OUTLINE_POINTS: int = 64
"""Vertices used when an ellipse is approximated as a polygon (SVG, shapely metrics)."""

TAG_COLORS: tuple[str, ...] = (
    "#1f77b4",  # 0 top
    "#ff7f0e",  # 1 right
    "#2ca02c",  # 2 bottom
    "#d62728",  # 3 left
    "#9467bd",  # 4 lower right corner
    "#8c564b",  # 5 upper right corner
    "#e377c2",  # 6 lower left corner
    "#7f7f7f",  # 7 upper left corner
)

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
