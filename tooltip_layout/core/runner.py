# tooltip_layout/core/runner.py
"""
CLI entrypoint: load a mask SVG (or JSON ellipses), fit to canvas, lay out labels,
write layout.json, layout.png, debug.png and layout.svg.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tooltip_layout.core.candidates import generate_all_candidates
from tooltip_layout.core.config import (
    BOUNDS_MODE,
    BOUNDS_MODES,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE_PT,
    DEFAULT_LABEL_HEIGHT,
    DEFAULT_LABEL_WIDTH,
    DEFAULT_VIEWPORT_HEIGHT_PX,
    LOG_LEVEL,
    SEARCH_MAX_EXPANSIONS,
)
from tooltip_layout.core.error_codes import MASK_INVALID, LayoutError, user_message
from tooltip_layout.core.hits import count_found, match_guesses, parse_guesses
from tooltip_layout.core.io import load_ellipses_json, load_mask_svg
from tooltip_layout.core.layout import layout_labels, layout_mask
from tooltip_layout.core.render import render_debug, render_layout
from tooltip_layout.core.render_svg import export_layout_svg
from tooltip_layout.core.reporting import ensure_report_dir, write_layout_json, write_run_metadata_json
from tooltip_layout.core.scaling import canvas_height_for_viewport, parse_size
from tooltip_layout.core.text_metrics import label_size_for_text

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Place tooltip labels next to elliptical regions.")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--mask", type=str, default=None, help="Mask SVG with <ellipse> regions")
    src.add_argument("--ellipses", type=str, default=None, help="JSON list of ellipse records (canvas units)")
    p.add_argument("--canvas-size", type=str, default=None, dest="canvas_size",
                   help="Canvas WxH; required with --ellipses")
    p.add_argument("--canvas-height", type=float, default=None, dest="canvas_height",
                   help="Canvas height (px) for --mask; width follows the image aspect")
    p.add_argument("--label-size", type=str, default=f"{DEFAULT_LABEL_WIDTH:g}x{DEFAULT_LABEL_HEIGHT:g}",
                   dest="label_size", help="Label WxH in canvas px")
    p.add_argument("--text", type=str, default=None, help="Label text; sizes labels from the text")
    p.add_argument("--font-size-pt", type=float, default=DEFAULT_FONT_SIZE_PT, dest="font_size_pt")
    p.add_argument("--guesses", type=str, default="", help="Guess clicks as 'x,y;x,y' in canvas px")
    p.add_argument("--bounds-mode", type=str, default=BOUNDS_MODE, choices=BOUNDS_MODES, dest="bounds_mode")
    p.add_argument("--max-expansions", type=int, default=SEARCH_MAX_EXPANSIONS, dest="max_expansions",
                   help="Give up after this many search expansions")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default="reports", dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--batch-dir", type=str, default=None, dest="batch_dir", help="Batch mode: directory of mask SVGs")
    p.add_argument("--batch-limit", type=int, default=None, dest="batch_limit", help="Max cases in batch")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    if args.text:
        label_size = label_size_for_text(args.text, DEFAULT_FONT_FAMILY, args.font_size_pt)
    else:
        try:
            label_size = parse_size(args.label_size)
        except ValueError as e:
            raise SystemExit(str(e)) from e
    if args.canvas_height is not None:
        canvas_height = args.canvas_height
    else:
        canvas_height = canvas_height_for_viewport(DEFAULT_VIEWPORT_HEIGHT_PX)
    try:
        guesses = parse_guesses(args.guesses)
    except ValueError as e:
        raise SystemExit(str(e)) from e

    if args.batch_dir:
        from tooltip_layout.core.batch import run_batch
        batch_dir = Path(args.batch_dir)
        if not batch_dir.is_absolute():
            batch_dir = repo_root / batch_dir
        out = run_batch(
            run_name=args.run_name,
            batch_dir=batch_dir,
            repo_root=repo_root,
            canvas_height=canvas_height,
            label_size=label_size,
            limit=args.batch_limit,
            bounds_mode=args.bounds_mode,
            max_expansions=args.max_expansions,
        )
        print(out / "index.csv")
        return

    if args.mask:
        try:
            mask = load_mask_svg(args.mask, repo_root=repo_root, label_size=label_size)
        except (FileNotFoundError, ValueError) as e:
            logger.error(str(e))
            raise SystemExit(user_message(MASK_INVALID)) from e
        try:
            ml = layout_mask(mask, canvas_height, label_size=label_size,
                             bounds_mode=args.bounds_mode, max_expansions=args.max_expansions)
        except LayoutError as e:
            logger.error(str(e))
            raise SystemExit(e.user_message()) from e
        ellipses, result = ml.ellipses, ml.result
        canvas_w, canvas_h = ml.canvas_width, ml.canvas_height
        source = args.mask
        run_label_size = label_size
    elif args.ellipses:
        if not args.canvas_size:
            raise SystemExit("--canvas-size is required with --ellipses")
        try:
            canvas_w, canvas_h = parse_size(args.canvas_size)
            ellipses = load_ellipses_json(args.ellipses, repo_root=repo_root)
        except (FileNotFoundError, ValueError) as e:
            raise SystemExit(str(e)) from e
        try:
            result = layout_labels(ellipses, canvas_w, canvas_h,
                                   bounds_mode=args.bounds_mode, max_expansions=args.max_expansions)
        except LayoutError as e:
            logger.error(str(e))
            raise SystemExit(e.user_message()) from e
        source = args.ellipses
        # each record carries its own label size
        run_label_size = None
    else:
        raise SystemExit("Provide --mask, --ellipses or --batch-dir")

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    layout_path = write_layout_json(report_dir, result, ellipses, canvas_w, canvas_h, source=source)
    write_run_metadata_json(report_dir, args.run_name, source, canvas_w, canvas_h, run_label_size,
                            args.bounds_mode, args.max_expansions)
    texts = [args.text] * len(result.rects) if args.text else None
    matched = match_guesses(ellipses, guesses) if guesses else None
    png_path = report_dir / "layout.png"
    debug_path = report_dir / "debug.png"
    render_layout(ellipses, result.rects, canvas_w, canvas_h, png_path, texts=texts, matched=matched,
                  font_size_pt=args.font_size_pt)
    candidates = generate_all_candidates(ellipses, canvas_w, canvas_h, bounds_mode=args.bounds_mode)
    render_debug(ellipses, candidates, result.rects, canvas_w, canvas_h, debug_path)
    svg_path = export_layout_svg(ellipses, result.rects, canvas_w, canvas_h, report_dir / "layout.svg", texts=texts,
                                  matched=matched)

    for p in (layout_path, png_path, debug_path, svg_path):
        print(p)
    print("Status:", result.status)
    if matched is not None:
        print(f"Found: {count_found(matched)}/{len(ellipses)}")


if __name__ == "__main__":
    main()
