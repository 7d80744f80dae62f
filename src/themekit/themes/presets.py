# ==================================================================================================
#                               Theme presets
# ==================================================================================================
#
# One factory per named preset. Every factory starts from the same complete
# baseline (`_baseline`) and then adjusts it, so a theme always defines the
# full key set and switching themes resets whatever an earlier theme set.
#
# Which keys receive the `color` option is preset-specific:
#   half_open / map / nothing  -> text, labels, ticks, axis lines (ink)
#   minimal_grid               -> grid lines
#   minimal_hgrid / vgrid      -> grid lines and the single axis line kept

import logging
from typing import Any, Dict, Optional

from themekit.constants import (
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_WIDTH,
    DEFAULT_MAJOR_GRID_WIDTH,
    DEFAULT_MINOR_GRID_WIDTH,
    DEFAULT_REL_LARGE,
    DEFAULT_REL_SMALL,
    DEFAULT_TICK_LENGTH,
    GRID_MAJOR_KEY,
    GRID_MINOR_COLOR_KEY,
    GRID_MINOR_KEY,
    GRID_MINOR_WIDTH_KEY,
    INK_COLOR,
    LIGHT_GREY,
    PANEL_BACKGROUND,
    PANEL_LINESTYLE_KEY,
)
from themekit.themes.options import ThemeOptions
from themekit.themes.style import THEME_LAYER, Style

logger = logging.getLogger(__name__)

INK_KEYS: tuple[str, ...] = (
    "text.color",
    "axes.labelcolor",
    "axes.titlecolor",
    "xtick.color",
    "ytick.color",
    "axes.edgecolor",
)
GRID_COLOR_KEYS: tuple[str, ...] = ("grid.color", GRID_MINOR_COLOR_KEY)


# ==================================================================================================
#                                   HELPERS
# ==================================================================================================

def _options(
    font_size: float,
    font_family: str,
    color: Optional[str],
    line_width: float,
    rel_small: float,
    rel_large: float,
) -> ThemeOptions:
    return ThemeOptions(
        font_size=font_size,
        font_family=font_family,
        color=color,
        line_width=line_width,
        rel_small=rel_small,
        rel_large=rel_large,
    )


def _baseline(opts: ThemeOptions, ink: str) -> Dict[str, Any]:
    """Full key set shared by every preset: classic half-open axes, no grid."""
    values: Dict[str, Any] = {
        # text
        "font.size": opts.font_size,
        "text.color": ink,
        "axes.labelcolor": ink,
        "axes.labelsize": opts.font_size,
        "axes.titlecolor": ink,
        "axes.titlesize": opts.large_size,
        "axes.titleweight": "bold",
        "axes.titlelocation": "left",
        "figure.titlesize": opts.large_size,
        "figure.titleweight": "bold",
        "legend.fontsize": opts.small_size,
        "legend.title_fontsize": opts.font_size,
        "legend.frameon": False,
        # axis lines
        "axes.edgecolor": ink,
        "axes.linewidth": opts.line_width,
        "axes.spines.left": True,
        "axes.spines.bottom": True,
        "axes.spines.top": False,
        "axes.spines.right": False,
        PANEL_LINESTYLE_KEY: "-",
        # ticks
        "xtick.color": ink,
        "ytick.color": ink,
        "xtick.labelsize": opts.small_size,
        "ytick.labelsize": opts.small_size,
        "xtick.major.width": opts.line_width,
        "ytick.major.width": opts.line_width,
        "xtick.major.size": DEFAULT_TICK_LENGTH,
        "ytick.major.size": DEFAULT_TICK_LENGTH,
        "xtick.minor.visible": False,
        "ytick.minor.visible": False,
        "xtick.bottom": True,
        "ytick.left": True,
        "xtick.labelbottom": True,
        "ytick.labelleft": True,
        # grid
        "axes.grid": False,
        "axes.grid.axis": "both",
        "axes.grid.which": "major",
        "axes.axisbelow": True,
        "grid.color": LIGHT_GREY,
        "grid.linewidth": DEFAULT_MAJOR_GRID_WIDTH,
        "grid.linestyle": "-",
        GRID_MAJOR_KEY: "none",
        GRID_MINOR_KEY: "none",
        GRID_MINOR_COLOR_KEY: LIGHT_GREY,
        GRID_MINOR_WIDTH_KEY: DEFAULT_MINOR_GRID_WIDTH,
        # background
        "axes.facecolor": PANEL_BACKGROUND,
        "figure.facecolor": PANEL_BACKGROUND,
    }
    if opts.font_family:
        values["font.family"] = opts.font_family
    return values


def _hide_all_spines(values: Dict[str, Any]) -> None:
    for side in ("left", "bottom", "top", "right"):
        values[f"axes.spines.{side}"] = False


def _grid(values: Dict[str, Any], direction: str, color: str) -> None:
    """Switch on major grid lines along `direction` ("xy", "x" or "y")."""
    values["axes.grid"] = True
    values["axes.grid.axis"] = "both" if direction == "xy" else direction
    values[GRID_MAJOR_KEY] = direction
    for key in GRID_COLOR_KEYS:
        values[key] = color


def _build(name: str, values: Dict[str, Any]) -> Style:
    logger.debug("Built theme %s (%d keys)", name, len(values))
    return Style(name, values, layer=THEME_LAYER)


# ==================================================================================================
#                                   PRESETS
# ==================================================================================================

def theme_half_open(
    font_size: float = DEFAULT_FONT_SIZE,
    font_family: str = "",
    color: Optional[str] = None,
    line_width: float = DEFAULT_LINE_WIDTH,
    rel_small: float = DEFAULT_REL_SMALL,
    rel_large: float = DEFAULT_REL_LARGE,
) -> Style:
    """
    Classic publication look: left and bottom axis lines, no grid.

    Parameters
    ----------
    font_size
        Base font size in points.
    font_family
        Font family; empty keeps matplotlib's default.
    color
        Ink colour for text, ticks and axis lines. Defaults to black.
    line_width
        Axis line and tick width in points.
    rel_small, rel_large
        Tick/legend and title sizes relative to `font_size`.

    Returns
    -------
    Style
        Complete theme mapping.

    Usage example
    -------------
        theme = theme_half_open(font_size=12)
        with style_context(theme):
            fig, ax = plt.subplots()
    """
    opts = _options(font_size, font_family, color, line_width, rel_small, rel_large)
    return _build("half_open", _baseline(opts, opts.resolve_color(INK_COLOR)))


def theme_cowplot(**kwargs: Any) -> Style:
    """Alias of `theme_half_open`, kept for readers coming from cowplot."""
    return theme_half_open(**kwargs)


def theme_minimal_grid(
    font_size: float = DEFAULT_FONT_SIZE,
    font_family: str = "",
    color: Optional[str] = None,
    line_width: float = DEFAULT_LINE_WIDTH,
    rel_small: float = DEFAULT_REL_SMALL,
    rel_large: float = DEFAULT_REL_LARGE,
) -> Style:
    """
    Minimal look with a full background grid and no axis lines or tick marks.

    `color` sets the grid line colour (light grey by default).
    """
    opts = _options(font_size, font_family, color, line_width, rel_small, rel_large)
    values = _baseline(opts, INK_COLOR)
    _hide_all_spines(values)
    _grid(values, "xy", opts.resolve_color(LIGHT_GREY))
    values["xtick.major.size"] = 0.0
    values["ytick.major.size"] = 0.0
    return _build("minimal_grid", values)


def theme_minimal_hgrid(
    font_size: float = DEFAULT_FONT_SIZE,
    font_family: str = "",
    color: Optional[str] = None,
    line_width: float = DEFAULT_LINE_WIDTH,
    rel_small: float = DEFAULT_REL_SMALL,
    rel_large: float = DEFAULT_REL_LARGE,
) -> Style:
    """
    Horizontal grid lines only, with an x axis line in the grid colour.

    Suited to bar charts and other plots read along the y axis.
    """
    opts = _options(font_size, font_family, color, line_width, rel_small, rel_large)
    line_color = opts.resolve_color(LIGHT_GREY)
    values = _baseline(opts, INK_COLOR)
    _hide_all_spines(values)
    values["axes.spines.bottom"] = True
    values["axes.edgecolor"] = line_color
    _grid(values, "y", line_color)
    values["ytick.major.size"] = 0.0
    return _build("minimal_hgrid", values)


def theme_minimal_vgrid(
    font_size: float = DEFAULT_FONT_SIZE,
    font_family: str = "",
    color: Optional[str] = None,
    line_width: float = DEFAULT_LINE_WIDTH,
    rel_small: float = DEFAULT_REL_SMALL,
    rel_large: float = DEFAULT_REL_LARGE,
) -> Style:
    """Vertical grid lines only, with a y axis line in the grid colour."""
    opts = _options(font_size, font_family, color, line_width, rel_small, rel_large)
    line_color = opts.resolve_color(LIGHT_GREY)
    values = _baseline(opts, INK_COLOR)
    _hide_all_spines(values)
    values["axes.spines.left"] = True
    values["axes.edgecolor"] = line_color
    _grid(values, "x", line_color)
    values["xtick.major.size"] = 0.0
    return _build("minimal_vgrid", values)


def theme_map(
    font_size: float = DEFAULT_FONT_SIZE,
    font_family: str = "",
    color: Optional[str] = None,
    line_width: float = DEFAULT_LINE_WIDTH,
    rel_small: float = DEFAULT_REL_SMALL,
    rel_large: float = DEFAULT_REL_LARGE,
) -> Style:
    """
    Map look: no axis lines, ticks, tick labels or grid; titles and legends stay.
    """
    opts = _options(font_size, font_family, color, line_width, rel_small, rel_large)
    values = _baseline(opts, opts.resolve_color(INK_COLOR))
    _hide_all_spines(values)
    values.update({
        "xtick.bottom": False,
        "ytick.left": False,
        "xtick.labelbottom": False,
        "ytick.labelleft": False,
    })
    return _build("map", values)


def theme_nothing(
    font_size: float = DEFAULT_FONT_SIZE,
    font_family: str = "",
    color: Optional[str] = None,
    line_width: float = DEFAULT_LINE_WIDTH,
    rel_small: float = DEFAULT_REL_SMALL,
    rel_large: float = DEFAULT_REL_LARGE,
) -> Style:
    """
    Draw nothing but the data: no axes decorations, labels or background.
    """
    opts = _options(font_size, font_family, color, line_width, rel_small, rel_large)
    values = _baseline(opts, opts.resolve_color(INK_COLOR))
    _hide_all_spines(values)
    values.update({
        "xtick.bottom": False,
        "ytick.left": False,
        "xtick.labelbottom": False,
        "ytick.labelleft": False,
        "axes.facecolor": "none",
        "figure.facecolor": "none",
    })
    return _build("nothing", values)
