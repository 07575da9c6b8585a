# tooltip_layout/core/io.py
"""
Load ellipse regions from an SVG mask (root width/height plus <ellipse> elements)
or from a JSON list of ellipse records.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from tooltip_layout.core.config import (
    DEFAULT_LABEL_HEIGHT,
    DEFAULT_LABEL_WIDTH,
    IMAGE_SCALE_MULTIPLIER,
)
from tooltip_layout.core.types import Ellipse


@dataclass
class MaskImage:
    """Regions of one mask, in image pixel space (already multiplied)."""
    width: float
    height: float
    ellipses: list[Ellipse]
    source: str = ""


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _local_name(tag: str) -> str:
    """Strip the {namespace} prefix ElementTree puts on tags."""
    return tag.rsplit("}", 1)[-1]


def _length(value: str | None, what: str) -> float:
    """Parse an SVG length attribute; accepts a trailing 'px'."""
    if value is None:
        raise ValueError(f"Mask SVG is missing {what}")
    s = value.strip()
    if s.endswith("px"):
        s = s[:-2]
    try:
        return float(s)
    except ValueError as e:
        raise ValueError(f"Mask SVG has a non-numeric {what}: {value!r}") from e


def parse_mask_svg(
    svg_text: str,
    scale_multiplier: float = IMAGE_SCALE_MULTIPLIER,
    label_size: tuple[float, float] = (DEFAULT_LABEL_WIDTH, DEFAULT_LABEL_HEIGHT),
    source: str = "",
) -> MaskImage:
    """
    Parse mask SVG text. Width, height and every ellipse's cx, cy, rx, ry are multiplied
    by scale_multiplier; each ellipse gets label_size (width, height).
    Raises ValueError on malformed XML, missing attributes or a non-positive size.
    """
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise ValueError(f"Mask SVG is not valid XML: {e}") from e
    if _local_name(root.tag) != "svg":
        raise ValueError(f"Mask root element is <{_local_name(root.tag)}>, expected <svg>")

    width = _length(root.get("width"), "width") * scale_multiplier
    height = _length(root.get("height"), "height") * scale_multiplier
    if not (width > 0 and height > 0):
        raise ValueError(f"Mask SVG size must be positive, got {width:g}x{height:g}")
    label_w, label_h = label_size

    ellipses: list[Ellipse] = []
    for el in root.iter():
        if _local_name(el.tag) != "ellipse":
            continue
        ellipses.append(
            Ellipse(
                cx=_length(el.get("cx"), "ellipse cx") * scale_multiplier,
                cy=_length(el.get("cy"), "ellipse cy") * scale_multiplier,
                rx=_length(el.get("rx"), "ellipse rx") * scale_multiplier,
                ry=_length(el.get("ry"), "ellipse ry") * scale_multiplier,
                rect_width=float(label_w),
                rect_height=float(label_h),
            )
        )
    return MaskImage(width=width, height=height, ellipses=ellipses, source=source)


def load_mask_svg(
    path: str | Path,
    repo_root: Path | None = None,
    scale_multiplier: float = IMAGE_SCALE_MULTIPLIER,
    label_size: tuple[float, float] = (DEFAULT_LABEL_WIDTH, DEFAULT_LABEL_HEIGHT),
) -> MaskImage:
    """
    Read and parse a mask SVG file.
    Raises FileNotFoundError if path is missing, ValueError if the mask is malformed.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Mask file not found: {resolved}")
    text = resolved.read_text(encoding="utf-8")
    return parse_mask_svg(text, scale_multiplier=scale_multiplier, label_size=label_size, source=str(path))


def load_ellipses_json(path: str | Path, repo_root: Path | None = None) -> list[Ellipse]:
    """
    Read a JSON list of {cx, cy, rx, ry, rectWidth, rectHeight} records
    (or {"ellipses": [...]}). Raises FileNotFoundError / ValueError.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Ellipse file not found: {resolved}")
    data = json.loads(resolved.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("ellipses", [])
    if not isinstance(data, list):
        raise ValueError("Ellipse JSON must be a list of records or {'ellipses': [...]}")
    out: list[Ellipse] = []
    for i, rec in enumerate(data):
        try:
            out.append(Ellipse.from_record(rec))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Ellipse record {i} is invalid: {e}") from e
    return out
