"""
Environment-driven settings.
"""

from __future__ import annotations

import logging

from tooltip_layout.core.config import (
    BOUNDS_MODE,
    BOUNDS_MODE_LEGACY,
    BOUNDS_MODE_SYMMETRIC,
    BOUNDS_MODES,
    bounds_mode_from_env,
)


def test_bounds_mode_from_env_known_values() -> None:
    assert bounds_mode_from_env(None) == BOUNDS_MODE_SYMMETRIC
    assert bounds_mode_from_env("") == BOUNDS_MODE_SYMMETRIC
    assert bounds_mode_from_env(" Legacy ") == BOUNDS_MODE_LEGACY


def test_unknown_bounds_mode_falls_back_with_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="tooltip_layout.core.config"):
        assert bounds_mode_from_env("strict") == BOUNDS_MODE_SYMMETRIC
    assert "strict" in caplog.text


def test_active_bounds_mode_is_known() -> None:
    assert BOUNDS_MODE in BOUNDS_MODES
