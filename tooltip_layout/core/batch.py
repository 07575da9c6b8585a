"""
Batch mode: lay out labels for every mask SVG in a directory.
Output: reports/batch_<run_name>/index.csv and cases/<case_id>/ with layout.json and images.
"""

from __future__ import annotations

import csv
import logging
import time
from pathlib import Path

from tooltip_layout.core.candidates import generate_all_candidates
from tooltip_layout.core.config import (
    BOUNDS_MODE,
    DEFAULT_LABEL_HEIGHT,
    DEFAULT_LABEL_WIDTH,
    DEFAULT_VIEWPORT_HEIGHT_PX,
    REPORTS_DIR,
    SEARCH_MAX_EXPANSIONS,
)
from tooltip_layout.core.error_codes import MASK_INVALID, LayoutError
from tooltip_layout.core.io import load_mask_svg
from tooltip_layout.core.layout import layout_mask
from tooltip_layout.core.render import render_debug, render_layout
from tooltip_layout.core.reporting import ensure_report_dir, write_layout_json, write_run_metadata_json
from tooltip_layout.core.scaling import canvas_height_for_viewport

logger = logging.getLogger(__name__)

INDEX_FIELDS = [
    "case_id", "source", "n_ellipses", "status", "error",
    "min_candidates", "expansions", "duration_ms",
]


def _error_row(case_id: str, source: str, error_key: str, t0: float) -> dict:
    return {
        "case_id": case_id, "source": source, "n_ellipses": "", "status": "error", "error": error_key,
        "min_candidates": "", "expansions": "", "duration_ms": int((time.perf_counter() - t0) * 1000),
    }


def run_batch(
    run_name: str,
    batch_dir: Path,
    repo_root: Path | None = None,
    canvas_height: float | None = None,
    label_size: tuple[float, float] = (DEFAULT_LABEL_WIDTH, DEFAULT_LABEL_HEIGHT),
    limit: int | None = None,
    bounds_mode: str = BOUNDS_MODE,
    max_expansions: int | None = SEARCH_MAX_EXPANSIONS,
    render: bool = True,
) -> Path:
    """
    Run every *.svg in batch_dir. Cases that fail to load or lay out are recorded as
    error rows and the batch continues. Returns the batch report directory.
    """
    root = repo_root or Path.cwd().resolve()
    if not batch_dir.is_dir():
        raise ValueError(f"Batch directory not found: {batch_dir}")
    height = canvas_height if canvas_height is not None else canvas_height_for_viewport(DEFAULT_VIEWPORT_HEIGHT_PX)

    out_dir = ensure_report_dir(root, f"batch_{run_name}", output_dir=REPORTS_DIR)
    cases_dir = out_dir / "cases"
    cases_dir.mkdir(parents=True, exist_ok=True)
    mask_files = sorted(batch_dir.glob("*.svg"))
    if limit is not None:
        mask_files = mask_files[:limit]

    rows: list[dict] = []
    for i, mask_path in enumerate(mask_files):
        case_id = f"case_{i:04d}_{mask_path.stem}"
        source = str(mask_path.relative_to(root)) if root in mask_path.parents else str(mask_path)
        t0 = time.perf_counter()
        try:
            mask = load_mask_svg(mask_path)
        except ValueError as e:
            logger.warning(f"Skipping {source}: {e}")
            rows.append(_error_row(case_id, source, MASK_INVALID, t0))
            continue
        try:
            ml = layout_mask(mask, height, label_size=label_size, bounds_mode=bounds_mode,
                             max_expansions=max_expansions)
        except LayoutError as e:
            logger.warning(f"Layout failed for {source}: {e}")
            rows.append(_error_row(case_id, source, e.error_key, t0))
            continue
        duration_ms = int((time.perf_counter() - t0) * 1000)

        case_dir = cases_dir / case_id
        case_dir.mkdir(parents=True, exist_ok=True)
        write_layout_json(case_dir, ml.result, ml.ellipses, ml.canvas_width, ml.canvas_height, source=source)
        write_run_metadata_json(case_dir, run_name, source, ml.canvas_width, ml.canvas_height, label_size,
                                bounds_mode, max_expansions)
        if render:
            render_layout(ml.ellipses, ml.result.rects, ml.canvas_width, ml.canvas_height, case_dir / "layout.png")
            candidates = generate_all_candidates(ml.ellipses, ml.canvas_width, ml.canvas_height,
                                                 bounds_mode=bounds_mode)
            render_debug(ml.ellipses, candidates, ml.result.rects, ml.canvas_width, ml.canvas_height,
                         case_dir / "debug.png")
        counts = ml.result.candidate_counts
        rows.append({
            "case_id": case_id, "source": source, "n_ellipses": len(ml.ellipses),
            "status": ml.result.status, "error": "",
            "min_candidates": min(counts) if counts else "", "expansions": ml.result.expansions,
            "duration_ms": duration_ms,
        })

    index_path = out_dir / "index.csv"
    with open(index_path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=INDEX_FIELDS)
        w.writeheader()
        w.writerows(rows)
    return out_dir
