# ==================================================================================================
#                               Decorator overlays
# ==================================================================================================
#
# Partial styles meant to be layered after a base theme. An overlay only
# carries the keys it changes; everything else comes from the theme below it.
#
# Overlays must come after the theme in the layer order: a theme defines the
# full key set and would overwrite them. `themekit.themes.compose.compose`
# enforces this order.

import logging
from typing import Any, Dict

from themekit.constants import (
    DEFAULT_MAJOR_GRID_WIDTH,
    DEFAULT_MINOR_GRID_WIDTH,
    GRID_DIRECTIONS,
    GRID_MAJOR_KEY,
    GRID_MINOR_COLOR_KEY,
    GRID_MINOR_KEY,
    GRID_MINOR_WIDTH_KEY,
    LIGHT_GREY,
    PANEL_LINESTYLE_KEY,
)
from themekit.errors import InvalidConfiguration
from themekit.themes.options import check_choice, check_color, check_linestyle, check_positive
from themekit.themes.style import OVERLAY_LAYER, Style

logger = logging.getLogger(__name__)


def _grid_axis(major: str, minor: str) -> str:
    """rcParams can only hold one grid axis; use the union of both directions."""
    union = set(major.replace("none", "")) | set(minor.replace("none", ""))
    if union == {"x", "y"}:
        return "both"
    return union.pop() if union else "both"


def _grid_which(major: str, minor: str) -> str:
    if major != "none" and minor != "none":
        return "both"
    return "minor" if minor != "none" else "major"


def background_grid(
    major: str = "xy",
    minor: str = "none",
    major_linewidth: float = DEFAULT_MAJOR_GRID_WIDTH,
    minor_linewidth: float = DEFAULT_MINOR_GRID_WIDTH,
    major_color: str = LIGHT_GREY,
    minor_color: str = LIGHT_GREY,
) -> Style:
    """
    Add background grid lines.

    Parameters
    ----------
    major
        Directions for major grid lines: ``"xy"``, ``"x"``, ``"y"`` or ``"none"``.
    minor
        Directions for minor grid lines, same values as `major`.
    major_linewidth, minor_linewidth
        Line widths in points.
    major_color, minor_color
        Grid line colours.

    Returns
    -------
    Style
        Overlay carrying only grid keys.

    Usage example
    -------------
        style = compose(theme_half_open(), background_grid(major="y"))
    """
    check_choice("major", major, GRID_DIRECTIONS)
    check_choice("minor", minor, GRID_DIRECTIONS)
    major_width = check_positive("major_linewidth", major_linewidth)
    minor_width = check_positive("minor_linewidth", minor_linewidth)
    check_color("major_color", major_color)
    check_color("minor_color", minor_color)

    enabled = major != "none" or minor != "none"
    values: Dict[str, Any] = {
        "axes.grid": enabled,
        "axes.grid.axis": _grid_axis(major, minor),
        "axes.grid.which": _grid_which(major, minor),
        "axes.axisbelow": True,
        "grid.color": major_color,
        "grid.linewidth": major_width,
        "grid.linestyle": "-",
        "xtick.minor.visible": "x" in minor,
        "ytick.minor.visible": "y" in minor,
        GRID_MAJOR_KEY: major,
        GRID_MINOR_KEY: minor,
        GRID_MINOR_COLOR_KEY: minor_color,
        GRID_MINOR_WIDTH_KEY: minor_width,
    }
    logger.debug("Built background_grid overlay (major=%s, minor=%s)", major, minor)
    return Style("background_grid", values, layer=OVERLAY_LAYER)


def panel_border(
    color: str = LIGHT_GREY,
    linewidth: float = 1.0,
    linestyle: str = "-",
    remove: bool = False,
) -> Style:
    """
    Draw a border around every panel, or remove it.

    In matplotlib the panel border and the axis lines are the same artists
    (spines), so the border replaces the theme's axis line colour and width.
    With faceted figures every sub-plot gets its own border.

    Parameters
    ----------
    color
        Border colour.
    linewidth
        Border width in points.
    linestyle
        Matplotlib line style (``"-"``, ``"--"``, ``"dotted"``, ...).
    remove
        If True, hide all four spines instead of drawing a border.

    Usage example
    -------------
        style = compose(theme_minimal_grid(), panel_border(color="grey"))
    """
    if not isinstance(remove, bool):
        raise InvalidConfiguration("remove", remove, "expected a bool")

    if remove:
        values: Dict[str, Any] = {f"axes.spines.{side}": False for side in ("left", "bottom", "top", "right")}
        logger.debug("Built panel_border overlay (remove)")
        return Style("panel_border", values, layer=OVERLAY_LAYER)

    check_color("color", color)
    width = check_positive("linewidth", linewidth)
    check_linestyle("linestyle", linestyle)

    values = {f"axes.spines.{side}": True for side in ("left", "bottom", "top", "right")}
    values.update({
        "axes.edgecolor": color,
        "axes.linewidth": width,
        PANEL_LINESTYLE_KEY: linestyle,
    })
    logger.debug("Built panel_border overlay (color=%s, linewidth=%s)", color, width)
    return Style("panel_border", values, layer=OVERLAY_LAYER)
