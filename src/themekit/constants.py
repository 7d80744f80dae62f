# ==================================================================================================
#                                   Constants
# ==================================================================================================
#
# Shared defaults for theme presets and overlays. Defining them once here keeps
# every preset on the same base sizes and greys.

from typing import Final, Tuple
# Base font size in points; titles and tick labels scale relative to it.
DEFAULT_FONT_SIZE: Final[float] = 14.0
# Tick labels and legend text.
DEFAULT_REL_SMALL: Final[float] = 12.0 / 14.0
# Axes and figure titles.
DEFAULT_REL_LARGE: Final[float] = 16.0 / 14.0
# Axis lines and tick marks, in points.
DEFAULT_LINE_WIDTH: Final[float] = 1.0

# Main ink for text and axis lines.
INK_COLOR: Final[str] = "black"
# Light grey (R's grey85) used for grid lines and panel borders.
LIGHT_GREY: Final[str] = "#d9d9d9"
PANEL_BACKGROUND: Final[str] = "white"

DEFAULT_TICK_LENGTH: Final[float] = 3.5
DEFAULT_MAJOR_GRID_WIDTH: Final[float] = 0.5
DEFAULT_MINOR_GRID_WIDTH: Final[float] = 0.25

# Grid direction values accepted by presets and `background_grid`.
GRID_DIRECTIONS: Final[Tuple[str, ...]] = ("xy", "x", "y", "none")

# Axes-only keys: settings that rcParams cannot express and that are applied
# by `themekit.themes.apply.apply_to_axes`.
AXES_ONLY_PREFIX: Final[str] = "themekit."
GRID_MAJOR_KEY: Final[str] = "themekit.grid.major"
GRID_MINOR_KEY: Final[str] = "themekit.grid.minor"
GRID_MINOR_COLOR_KEY: Final[str] = "themekit.grid.minor.color"
GRID_MINOR_WIDTH_KEY: Final[str] = "themekit.grid.minor.linewidth"
PANEL_LINESTYLE_KEY: Final[str] = "themekit.panel.linestyle"
