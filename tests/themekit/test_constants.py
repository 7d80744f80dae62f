"""Sanity checks for shared theme defaults."""

from themekit.constants import (
    AXES_ONLY_PREFIX,
    DEFAULT_FONT_SIZE,
    DEFAULT_REL_LARGE,
    DEFAULT_REL_SMALL,
    GRID_DIRECTIONS,
    GRID_MAJOR_KEY,
    GRID_MINOR_COLOR_KEY,
    GRID_MINOR_KEY,
    GRID_MINOR_WIDTH_KEY,
    PANEL_LINESTYLE_KEY,
)


def test_relative_sizes_resolve_to_whole_points_at_default_size() -> None:
    """Small and large text should be 12 and 16 points at the default 14."""
    assert DEFAULT_FONT_SIZE == 14.0
    assert round(DEFAULT_FONT_SIZE * DEFAULT_REL_SMALL, 6) == 12.0
    assert round(DEFAULT_FONT_SIZE * DEFAULT_REL_LARGE, 6) == 16.0


def test_axes_only_keys_share_prefix() -> None:
    """Axes-only keys are filtered from rcParams by prefix."""
    for key in (GRID_MAJOR_KEY, GRID_MINOR_KEY, GRID_MINOR_COLOR_KEY, GRID_MINOR_WIDTH_KEY, PANEL_LINESTYLE_KEY):
        assert key.startswith(AXES_ONLY_PREFIX)


def test_grid_directions_include_none() -> None:
    assert set(GRID_DIRECTIONS) == {"xy", "x", "y", "none"}
