# tooltip_layout/ui/app.py
"""
Streamlit viewer: upload a mask SVG, choose canvas height and label size,
view the label layout and download layout.json / layout.svg.
Run with: streamlit run tooltip_layout/ui/app.py
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

# Configure logging from env (e.g. LOG_LEVEL=DEBUG for development)
_log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, _log_level_name, logging.INFO))

import streamlit as st

from tooltip_layout.core.candidates import generate_all_candidates
from tooltip_layout.core.config import (
    BOUNDS_MODE,
    BOUNDS_MODES,
    DEFAULT_LABEL_HEIGHT,
    DEFAULT_LABEL_TEXT,
    DEFAULT_LABEL_WIDTH,
    DEFAULT_VIEWPORT_HEIGHT_PX,
)
from tooltip_layout.core.error_codes import MASK_INVALID, NO_FEASIBLE_LAYOUT, LayoutError, user_message
from tooltip_layout.core.hits import count_found, match_guesses, parse_guesses
from tooltip_layout.core.io import parse_mask_svg
from tooltip_layout.core.layout import layout_mask
from tooltip_layout.core.render import render_debug, render_layout
from tooltip_layout.core.render_svg import layout_to_svg
from tooltip_layout.core.reporting import layout_to_dict
from tooltip_layout.core.scaling import canvas_height_for_viewport
from tooltip_layout.ui.help_text import (
    GLOSSARY_MD,
    TOOLTIP_BOUNDS_MODE,
    TOOLTIP_CANVAS_HEIGHT,
    TOOLTIP_GUESSES,
    TOOLTIP_LABEL_SIZE,
    TOOLTIP_MASK,
    TOOLTIP_MAX_EXPANSIONS,
)

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Tooltip Layout", layout="wide")
st.title("Tooltip Layout")

with st.sidebar:
    uploaded = st.file_uploader("Mask SVG", type=["svg"], help=TOOLTIP_MASK)
    canvas_height = st.number_input(
        "Canvas height (px)",
        min_value=50.0,
        value=float(canvas_height_for_viewport(DEFAULT_VIEWPORT_HEIGHT_PX)),
        step=10.0,
        help=TOOLTIP_CANVAS_HEIGHT,
    )
    label_w = st.number_input("Label width (px)", min_value=1.0, value=float(DEFAULT_LABEL_WIDTH), step=5.0,
                              help=TOOLTIP_LABEL_SIZE)
    label_h = st.number_input("Label height (px)", min_value=1.0, value=float(DEFAULT_LABEL_HEIGHT), step=5.0)
    bounds_mode = st.selectbox("Bounds check", BOUNDS_MODES, index=BOUNDS_MODES.index(BOUNDS_MODE),
                               help=TOOLTIP_BOUNDS_MODE)
    max_exp = st.number_input("Max search steps", min_value=0, value=0, step=1000, help=TOOLTIP_MAX_EXPANSIONS)
    label_text = st.text_input("Label text", value=DEFAULT_LABEL_TEXT)
    guesses_text = st.text_input("Guesses (x,y; x,y)", value="", help=TOOLTIP_GUESSES)
    show_debug = st.checkbox("Show candidates", value=False)
    with st.expander("Help & glossary"):
        st.markdown(GLOSSARY_MD)

if uploaded is None:
    st.info("Upload a mask SVG to start.")
    st.stop()

try:
    mask = parse_mask_svg(uploaded.getvalue().decode("utf-8"), label_size=(label_w, label_h), source=uploaded.name)
except (UnicodeDecodeError, ValueError) as e:
    logger.warning(f"Mask rejected: {e}")
    st.error(user_message(MASK_INVALID))
    st.caption(str(e))
    st.stop()

try:
    ml = layout_mask(
        mask,
        canvas_height,
        label_size=(label_w, label_h),
        bounds_mode=bounds_mode,
        max_expansions=int(max_exp) or None,
    )
except LayoutError as e:
    st.error(e.user_message())
    st.caption(str(e))
    st.stop()

result = ml.result
if result.status == "infeasible":
    st.warning(user_message(NO_FEASIBLE_LAYOUT))
st.caption(
    f"{len(ml.ellipses)} regions · canvas {ml.canvas_width:.0f}×{ml.canvas_height:.0f} · "
    f"status **{result.status}** · candidates {result.candidate_counts} · {result.expansions} search steps"
)

texts = [label_text] * len(result.rects) if label_text else None
try:
    guesses = parse_guesses(guesses_text)
except ValueError as e:
    st.error(str(e))
    guesses = []
matched = match_guesses(ml.ellipses, guesses) if guesses else None
if matched is not None:
    st.metric("Regions found", f"{count_found(matched)} / {len(ml.ellipses)}")
with tempfile.TemporaryDirectory() as tmp:
    png = Path(tmp) / "layout.png"
    render_layout(ml.ellipses, result.rects, ml.canvas_width, ml.canvas_height, png, texts=texts, matched=matched)
    st.image(png.read_bytes(), caption="Layout")
    if show_debug:
        dbg = Path(tmp) / "debug.png"
        candidates = generate_all_candidates(ml.ellipses, ml.canvas_width, ml.canvas_height, bounds_mode=bounds_mode)
        render_debug(ml.ellipses, candidates, result.rects, ml.canvas_width, ml.canvas_height, dbg)
        st.image(dbg.read_bytes(), caption="Candidates by tag")

data = layout_to_dict(result, ml.ellipses, ml.canvas_width, ml.canvas_height, source=uploaded.name)
col1, col2 = st.columns(2)
with col1:
    st.download_button("Download layout.json", data=json.dumps(data, indent=2), file_name="layout.json",
                       mime="application/json")
with col2:
    svg = layout_to_svg(ml.ellipses, result.rects, ml.canvas_width, ml.canvas_height, texts=texts, matched=matched)
    st.download_button("Download layout.svg", data=svg, file_name="layout.svg", mime="image/svg+xml")
