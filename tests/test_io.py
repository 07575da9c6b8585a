"""
Mask SVG and ellipse JSON loading.
"""

from __future__ import annotations

import json

import pytest

from tooltip_layout.core.io import load_ellipses_json, load_mask_svg, parse_mask_svg
from tooltip_layout.core.types import Ellipse

MASK = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="50">'
    '<ellipse cx="10" cy="20" rx="5" ry="3"/>'
    "</svg>"
)


def test_parse_mask_svg_applies_multiplier() -> None:
    mask = parse_mask_svg(MASK)
    assert mask.width == 400
    assert mask.height == 200
    assert mask.ellipses == [Ellipse(cx=40, cy=80, rx=20, ry=12, rect_width=150, rect_height=100)]


def test_parse_mask_svg_px_units_and_nested_groups() -> None:
    svg = (
        '<svg width="20px" height="10px"><g><ellipse cx="1" cy="2" rx="3" ry="4"/></g>'
        '<ellipse cx="5" cy="6" rx="7" ry="8"/></svg>'
    )
    mask = parse_mask_svg(svg, scale_multiplier=1.0, label_size=(30, 20), source="m.svg")
    assert (mask.width, mask.height) == (20, 10)
    assert [(e.cx, e.ry) for e in mask.ellipses] == [(1, 4), (5, 8)]
    assert all(e.rect_width == 30 and e.rect_height == 20 for e in mask.ellipses)
    assert mask.source == "m.svg"


def test_parse_mask_svg_without_ellipses() -> None:
    mask = parse_mask_svg('<svg width="10" height="10"/>')
    assert mask.ellipses == []


@pytest.mark.parametrize(
    "svg",
    [
        "<svg width='10'",
        "<html width='10' height='10'/>",
        "<svg height='10'/>",
        "<svg width='ten' height='10'/>",
        "<svg width='10' height='10'><ellipse cx='1' cy='1' rx='1'/></svg>",
    ],
)
def test_parse_mask_svg_rejects_malformed(svg: str) -> None:
    with pytest.raises(ValueError):
        parse_mask_svg(svg)


def test_load_mask_svg_relative_to_repo_root(tmp_path) -> None:
    (tmp_path / "masks").mkdir()
    (tmp_path / "masks" / "a.svg").write_text(MASK, encoding="utf-8")
    mask = load_mask_svg("masks/a.svg", repo_root=tmp_path)
    assert len(mask.ellipses) == 1
    assert mask.source == "masks/a.svg"


def test_load_mask_svg_missing(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_mask_svg(tmp_path / "nope.svg")


def test_load_ellipses_json_list_and_wrapped(tmp_path) -> None:
    records = [{"cx": 1, "cy": 2, "rx": 3, "ry": 4, "rectWidth": 5, "rectHeight": 6}]
    (tmp_path / "list.json").write_text(json.dumps(records), encoding="utf-8")
    (tmp_path / "wrapped.json").write_text(json.dumps({"ellipses": records}), encoding="utf-8")
    expected = [Ellipse(1, 2, 3, 4, 5, 6)]
    assert load_ellipses_json(tmp_path / "list.json") == expected
    assert load_ellipses_json("wrapped.json", repo_root=tmp_path) == expected


def test_load_ellipses_json_bad_record(tmp_path) -> None:
    (tmp_path / "bad.json").write_text(json.dumps([{"cx": 1}]), encoding="utf-8")
    with pytest.raises(ValueError, match="record 0"):
        load_ellipses_json(tmp_path / "bad.json")
    (tmp_path / "scalar.json").write_text("3", encoding="utf-8")
    with pytest.raises(ValueError):
        load_ellipses_json(tmp_path / "scalar.json")


@pytest.mark.parametrize("size", ['width="0" height="10"', 'width="10" height="-5"', 'width="nan" height="10"'])
def test_parse_mask_svg_rejects_non_positive_size(size: str) -> None:
    with pytest.raises(ValueError, match="positive"):
        parse_mask_svg(f'<svg {size}><ellipse cx="1" cy="1" rx="1" ry="1"/></svg>')
