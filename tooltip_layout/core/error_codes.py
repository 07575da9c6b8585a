"""
Structured error codes for layout and run failures.
Use these keys in return values and exceptions; map to user-facing messages in the UI.
"""

from __future__ import annotations

# Known error keys
DEGENERATE_ELLIPSE = "degenerate_ellipse"
INVALID_CANVAS_BOUNDS = "invalid_canvas_bounds"
NO_FEASIBLE_LAYOUT = "no_feasible_layout"
SEARCH_BUDGET_EXCEEDED = "search_budget_exceeded"
MASK_INVALID = "mask_invalid"
RUN_FAILED = "run_failed"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    DEGENERATE_ELLIPSE: "A region has a zero or negative radius or label size. Check the mask.",
    INVALID_CANVAS_BOUNDS: "Canvas width and height must be positive.",
    NO_FEASIBLE_LAYOUT: "No label layout fits on this canvas. Try a smaller label or a larger canvas.",
    SEARCH_BUDGET_EXCEEDED: "Label layout search gave up. Try fewer regions or a larger budget.",
    MASK_INVALID: "Mask SVG could not be read. Check width, height and ellipse attributes.",
    RUN_FAILED: "Run failed. Check the mask and inputs.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)


class LayoutError(Exception):
    """Base for layout failures; carries an error key from this module."""
    error_key: str = RUN_FAILED

    def user_message(self) -> str:
        return user_message(self.error_key)


class DegenerateEllipseError(LayoutError, ValueError):
    """Ellipse with non-positive radius or label size, or a non-finite field."""
    error_key = DEGENERATE_ELLIPSE

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Ellipse {index} is degenerate: {reason}")


class InvalidCanvasBoundsError(LayoutError, ValueError):
    """Canvas width/height not positive and finite."""
    error_key = INVALID_CANVAS_BOUNDS

    def __init__(self, max_width: float, max_height: float) -> None:
        self.max_width = max_width
        self.max_height = max_height
        super().__init__(f"Invalid canvas bounds: {max_width!r} x {max_height!r}")


class SearchBudgetExceededError(LayoutError, RuntimeError):
    """Placement search popped more frames than the caller allowed."""
    error_key = SEARCH_BUDGET_EXCEEDED

    def __init__(self, max_expansions: int) -> None:
        self.max_expansions = max_expansions
        super().__init__(f"Placement search exceeded {max_expansions} expansions")
