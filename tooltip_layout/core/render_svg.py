"""
Export a layout as self-contained SVG: ellipse outlines, label rectangles, label text.
Canvas coordinates are used directly (SVG is y-down as well).
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Sequence

from tooltip_layout.core.config import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE_PT,
    ELLIPSE_LINE_WIDTH,
    HIT_COLOR,
    LABEL_FILL_COLOR,
    LABEL_TEXT_COLOR,
    MISS_COLOR,
)
from tooltip_layout.core.types import Ellipse, LabelRect

SVG_NS = "http://www.w3.org/2000/svg"


def layout_to_svg(
    ellipses: Sequence[Ellipse],
    rects: Sequence[LabelRect],
    canvas_width: float,
    canvas_height: float,
    texts: Sequence[str] | None = None,
    matched: Sequence[int | None] | None = None,
    font_size_pt: float = DEFAULT_FONT_SIZE_PT,
) -> str:
    """SVG document text for the layout."""
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": f"{canvas_width:.0f}",
            "height": f"{canvas_height:.0f}",
            "viewBox": f"0 0 {canvas_width:.2f} {canvas_height:.2f}",
        },
    )

    g_regions = ET.SubElement(root, "g", {"id": "regions"})
    for i, e in enumerate(ellipses):
        hit = matched is not None and i < len(matched) and matched[i] is not None
        ET.SubElement(
            g_regions,
            "ellipse",
            {
                "cx": f"{e.cx:.4f}",
                "cy": f"{e.cy:.4f}",
                "rx": f"{e.rx:.4f}",
                "ry": f"{e.ry:.4f}",
                "fill": "none",
                "stroke": HIT_COLOR if hit else MISS_COLOR,
                "stroke-width": f"{ELLIPSE_LINE_WIDTH:.2f}",
            },
        )

    g_labels = ET.SubElement(root, "g", {"id": "labels"})
    for i, rect in enumerate(rects):
        g = ET.SubElement(g_labels, "g", {"data-tag": str(rect.tag)})
        ET.SubElement(
            g,
            "rect",
            {
                "x": f"{rect.l:.4f}",
                "y": f"{rect.t:.4f}",
                "width": f"{rect.w:.4f}",
                "height": f"{rect.h:.4f}",
                "fill": LABEL_FILL_COLOR,
            },
        )
        if texts is not None and i < len(texts) and texts[i]:
            text = ET.SubElement(
                g,
                "text",
                {
                    "x": f"{rect.l:.4f}",
                    "y": f"{rect.t:.4f}",
                    "font-family": DEFAULT_FONT_FAMILY,
                    "font-size": f"{font_size_pt:.2f}",
                    "fill": LABEL_TEXT_COLOR,
                    "dominant-baseline": "hanging",
                    "textLength": f"{rect.w:.4f}",
                    "lengthAdjust": "spacingAndGlyphs",
                },
            )
            text.text = texts[i]

    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(root, encoding="unicode", method="xml")


def export_layout_svg(
    ellipses: Sequence[Ellipse],
    rects: Sequence[LabelRect],
    canvas_width: float,
    canvas_height: float,
    out_path: str | Path,
    texts: Sequence[str] | None = None,
    matched: Sequence[int | None] | None = None,
) -> Path:
    """Write layout SVG to out_path and return the path."""
    out = Path(out_path)
    out.write_text(
        layout_to_svg(ellipses, rects, canvas_width, canvas_height, texts=texts, matched=matched),
        encoding="utf-8",
    )
    return out
