# tooltip_layout/core/reporting.py
"""
Create reports/<run_name>/ and write layout.json and run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from tooltip_layout.core.config import (
    BOUNDS_MODE,
    CIRCLE_SEGMENTS,
    DEFAULT_LABEL_HEIGHT,
    DEFAULT_LABEL_WIDTH,
    IMAGE_SCALE_MULTIPLIER,
    REPORTS_DIR,
    SEARCH_MAX_EXPANSIONS,
    SLIDE_SEGMENTS,
)
from tooltip_layout.core.geometry import rect_gap_to_ellipse
from tooltip_layout.core.types import Ellipse, LayoutResult

SCHEMA_VERSION = "1.0"


def layout_to_dict(
    result: LayoutResult,
    ellipses: Sequence[Ellipse],
    canvas_width: float,
    canvas_height: float,
    source: str = "",
) -> dict:
    """Structure for layout.json: canvas, input ellipses, status, rects and per-label metrics."""
    labels = []
    for i, rect in enumerate(result.rects):
        entry = {"ellipse_index": i, "rect": rect.to_dict()}
        if i < len(ellipses):
            entry["gap_to_own_ellipse"] = round(rect_gap_to_ellipse(rect, ellipses[i]), 4)
        labels.append(entry)
    return {
        "schema_version": SCHEMA_VERSION,
        "input": {
            "source": source,
            "canvas": {"width": canvas_width, "height": canvas_height},
            "ellipses": [e.to_record() for e in ellipses],
        },
        "result": {
            "status": result.status,
            "feasible": result.feasible,
            "rects": [r.to_dict() for r in result.rects],
        },
        "metrics": {
            "candidate_counts": list(result.candidate_counts),
            "expansions": result.expansions,
            "labels": labels,
        },
        "warnings": list(result.warnings),
    }


def run_metadata_dict(
    run_name: str,
    source: str,
    canvas_width: float,
    canvas_height: float,
    label_size: tuple[float, float] | None,
    bounds_mode: str = BOUNDS_MODE,
    max_expansions: int | None = SEARCH_MAX_EXPANSIONS,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "source": source,
        "canvas": {"width": canvas_width, "height": canvas_height},
        "label_size": list(label_size) if label_size is not None else None,
        "bounds_mode": bounds_mode,
        "max_expansions": max_expansions,
        "config": {
            "CIRCLE_SEGMENTS": CIRCLE_SEGMENTS,
            "SLIDE_SEGMENTS": SLIDE_SEGMENTS,
            "IMAGE_SCALE_MULTIPLIER": IMAGE_SCALE_MULTIPLIER,
            "DEFAULT_LABEL_WIDTH": DEFAULT_LABEL_WIDTH,
            "DEFAULT_LABEL_HEIGHT": DEFAULT_LABEL_HEIGHT,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_layout_json(
    report_dir: Path,
    result: LayoutResult,
    ellipses: Sequence[Ellipse],
    canvas_width: float,
    canvas_height: float,
    source: str = "",
) -> Path:
    """Write layout.json to report_dir. Returns path to file."""
    path = report_dir / "layout.json"
    data = layout_to_dict(result, ellipses, canvas_width, canvas_height, source=source)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    source: str,
    canvas_width: float,
    canvas_height: float,
    label_size: tuple[float, float] | None,
    bounds_mode: str = BOUNDS_MODE,
    max_expansions: int | None = SEARCH_MAX_EXPANSIONS,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, source, canvas_width, canvas_height, label_size, bounds_mode, max_expansions)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
