# tooltip_layout/core/types.py
"""
Dataclasses for ellipse regions, label rectangles and layout results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping


LayoutStatus = Literal["placed", "empty_input", "infeasible"]


@dataclass(frozen=True)
class Ellipse:
    """Axis-aligned elliptical region with the size of the label it needs."""
    cx: float
    cy: float
    rx: float
    ry: float
    rect_width: float
    rect_height: float

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Ellipse":
        """Build from a mapping; accepts rect_width/rect_height or rectWidth/rectHeight."""
        width = record["rect_width"] if "rect_width" in record else record["rectWidth"]
        height = record["rect_height"] if "rect_height" in record else record["rectHeight"]
        return cls(
            cx=float(record["cx"]),
            cy=float(record["cy"]),
            rx=float(record["rx"]),
            ry=float(record["ry"]),
            rect_width=float(width),
            rect_height=float(height),
        )

    def to_record(self) -> dict[str, float]:
        return {
            "cx": self.cx,
            "cy": self.cy,
            "rx": self.rx,
            "ry": self.ry,
            "rectWidth": self.rect_width,
            "rectHeight": self.rect_height,
        }


@dataclass(frozen=True)
class LabelRect:
    """
    Label rectangle given by its center (x, y) and size (w, h).
    tag records which side or corner produced it (0-3 cardinal sides, 4-7 boundary corners).
    """
    x: float
    y: float
    w: float
    h: float
    tag: int

    @property
    def l(self) -> float:  # noqa: E743
        return self.x - self.w / 2.0

    @property
    def t(self) -> float:
        return self.y - self.h / 2.0

    @property
    def r(self) -> float:
        return self.x + self.w / 2.0

    @property
    def b(self) -> float:
        return self.y + self.h / 2.0

    def to_dict(self) -> dict[str, float | int]:
        return {
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "l": self.l,
            "t": self.t,
            "tag": self.tag,
        }


@dataclass
class LayoutResult:
    """
    Outcome of one layout call.
    rects is empty for empty_input and infeasible, otherwise one rect per ellipse in input order.
    """
    rects: list[LabelRect]
    status: LayoutStatus
    candidate_counts: list[int] = field(default_factory=list)
    expansions: int = 0
    warnings: list[str] = field(default_factory=list)

    @property
    def feasible(self) -> bool:
        return self.status != "infeasible"
