# tooltip_layout/core/render.py
"""
Matplotlib PNG rendering in canvas coordinates (origin top-left, y down):
layout.png (ellipses + placed labels) and debug.png (every candidate, coloured by tag).
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from tooltip_layout.core.config import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE_PT,
    ELLIPSE_LINE_WIDTH,
    HIT_COLOR,
    LABEL_FILL_COLOR,
    LABEL_TEXT_COLOR,
    MISS_COLOR,
    RENDER_DPI,
    TAG_COLORS,
)
from tooltip_layout.core.geometry import ellipse_outline
from tooltip_layout.core.types import Ellipse, LabelRect


def _new_fig(width_px: float, height_px: float) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(
        figsize=(max(1.0, width_px) / RENDER_DPI, max(1.0, height_px) / RENDER_DPI),
        dpi=RENDER_DPI,
        constrained_layout=False,
    )
    ax = fig.add_axes([0, 0, 1, 1])  # full-canvas axes
    ax.set_xlim(0, width_px)
    ax.set_ylim(height_px, 0)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    return fig, ax


def _save(fig: plt.Figure, output_path: str | Path) -> None:
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=RENDER_DPI, facecolor="white")
    plt.close(fig)


def _draw_ellipse(ax: plt.Axes, ellipse: Ellipse, color: str, linewidth: float) -> None:
    xy = ellipse_outline(ellipse)
    ax.plot(xy[:, 0], xy[:, 1], color=color, linewidth=linewidth, zorder=3)


def _draw_label(ax: plt.Axes, rect: LabelRect, text: str | None, font_size_pt: float) -> None:
    ax.add_patch(
        Rectangle((rect.l, rect.t), rect.w, rect.h, facecolor=LABEL_FILL_COLOR, edgecolor="none", zorder=4)
    )
    if text:
        ax.text(
            rect.l, rect.t, text,
            fontsize=font_size_pt,
            fontfamily=DEFAULT_FONT_FAMILY,
            ha="left", va="top",
            color=LABEL_TEXT_COLOR,
            clip_on=True,
            zorder=5,
        )


def render_layout(
    ellipses: Sequence[Ellipse],
    rects: Sequence[LabelRect],
    canvas_width: float,
    canvas_height: float,
    output_path: str | Path,
    texts: Sequence[str] | None = None,
    matched: Sequence[int | None] | None = None,
    font_size_pt: float = DEFAULT_FONT_SIZE_PT,
    line_width: float = ELLIPSE_LINE_WIDTH,
) -> None:
    """
    Render ellipses and their labels. An ellipse is stroked in the hit color when
    matched[i] is not None, otherwise in the miss color (all miss when matched is None).
    """
    fig, ax = _new_fig(canvas_width, canvas_height)
    for i, ellipse in enumerate(ellipses):
        hit = matched is not None and i < len(matched) and matched[i] is not None
        _draw_ellipse(ax, ellipse, HIT_COLOR if hit else MISS_COLOR, line_width)
    for i, rect in enumerate(rects):
        text = texts[i] if texts is not None and i < len(texts) else None
        _draw_label(ax, rect, text, font_size_pt)
    _save(fig, output_path)


def render_debug(
    ellipses: Sequence[Ellipse],
    candidates: Sequence[Sequence[LabelRect]],
    rects: Sequence[LabelRect],
    canvas_width: float,
    canvas_height: float,
    output_path: str | Path,
) -> None:
    """Render every candidate outline coloured by tag, with the chosen rects filled."""
    fig, ax = _new_fig(canvas_width, canvas_height)
    ax.add_patch(Rectangle((0, 0), canvas_width, canvas_height, fill=False, edgecolor="black", linewidth=1))
    for ellipse in ellipses:
        _draw_ellipse(ax, ellipse, "navy", 1.5)
    for cands in candidates:
        for c in cands:
            ax.add_patch(
                Rectangle(
                    (c.l, c.t), c.w, c.h,
                    fill=False,
                    edgecolor=TAG_COLORS[c.tag % len(TAG_COLORS)],
                    linewidth=0.5,
                    alpha=0.6,
                    zorder=2,
                )
            )
    for rect in rects:
        ax.add_patch(
            Rectangle((rect.l, rect.t), rect.w, rect.h, facecolor=LABEL_FILL_COLOR, edgecolor="black",
                      linewidth=1.5, alpha=0.9, zorder=4)
        )
    _save(fig, output_path)
