# tooltip_layout/core/text_metrics.py
"""
Size label rectangles from their text using Pillow font metrics.
1 pt = 1 canvas pixel.
"""

from __future__ import annotations

import warnings
from functools import lru_cache

from tooltip_layout.core.config import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE_PT,
    LABEL_TEXT_PADDING_PT,
)

_FALLBACK_FONT_FILES = ("DejaVuSans.ttf", "arial.ttf", "Arial.ttf")


@lru_cache(maxsize=32)
def _label_font(font_family: str, size_px: int):
    """Truetype font for the family, else a bundled fallback; warns once per family on fallback."""
    from PIL import ImageFont

    names = (f"{font_family}.ttf", f"{font_family.replace(' ', '')}.ttf") + _FALLBACK_FONT_FILES
    for name in names:
        try:
            return ImageFont.truetype(name, size=size_px)
        except OSError:
            continue
    warnings.warn(f"No font file for {font_family!r}; label sizes use Pillow's default font.", UserWarning)
    return ImageFont.load_default()


def measure_text_pt(text: str, font_family: str, font_size_pt: float) -> tuple[float, float]:
    """(width, height) of the ink box of text, rescaled to font_size_pt when the font size differs."""
    size_px = max(1, int(round(font_size_pt)))
    font = _label_font(font_family, size_px)
    left, top, right, bottom = font.getbbox(text) if text else (0, 0, 0, 0)
    scale = font_size_pt / max(1.0, float(getattr(font, "size", size_px)))
    return (float(right - left) * scale, float(bottom - top) * scale)


def label_size_for_text(
    text: str,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_pt: float = DEFAULT_FONT_SIZE_PT,
    padding_pt: float = LABEL_TEXT_PADDING_PT,
) -> tuple[float, float]:
    """Label (width, height) that holds text with padding on every side; never zero."""
    w, h = measure_text_pt(text, font_family, font_size_pt)
    return (max(1.0, w) + 2.0 * padding_pt, max(1.0, h) + 2.0 * padding_pt)
