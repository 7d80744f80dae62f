# ==================================================================================================
#                           Attaching styles to matplotlib
# ==================================================================================================
#
# Two ways to use a style:
# - rcParams (`style_context`, `use_style`) for figures created afterwards;
# - `apply_to_axes` / `apply_to_figure` for figures that already exist.
#
# Only rendering metadata is touched; artists holding data are left alone.

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Union

import matplotlib as mpl
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import AutoMinorLocator

from themekit.constants import (
    DEFAULT_MAJOR_GRID_WIDTH,
    DEFAULT_MINOR_GRID_WIDTH,
    GRID_MAJOR_KEY,
    GRID_MINOR_COLOR_KEY,
    GRID_MINOR_KEY,
    GRID_MINOR_WIDTH_KEY,
    LIGHT_GREY,
    PANEL_LINESTYLE_KEY,
)
from themekit.themes.compose import compose
from themekit.themes.style import Style

logger = logging.getLogger(__name__)

SPINE_SIDES: tuple[str, ...] = ("left", "bottom", "top", "right")


# ==================================================================================================
#                                   RCPARAMS
# ==================================================================================================

@contextmanager
def style_context(style: Style) -> Iterator[None]:
    """
    Temporarily apply `style` via `matplotlib.rc_context`.

    Usage example
    -------------
        with style_context(compose(theme_half_open(), background_grid())):
            fig, ax = plt.subplots()
    """
    with mpl.rc_context(style.rc_params()):
        yield


def use_style(style: Style) -> None:
    """Apply `style` globally through `matplotlib.rcParams`."""
    mpl.rcParams.update(style.rc_params())
    logger.debug("Applied %s to global rcParams", style.name)


# ==================================================================================================
#                                   EXISTING ARTISTS
# ==================================================================================================

def _grid_directions(values: Mapping[str, Any], key: str, fallback: str) -> str:
    direction = values.get(key)
    if direction is not None:
        return str(direction)
    return fallback


def _apply_spines(ax: Axes, values: Mapping[str, Any]) -> None:
    for side in SPINE_SIDES:
        spine = ax.spines[side]
        key = f"axes.spines.{side}"
        if key in values:
            spine.set_visible(bool(values[key]))
        if "axes.edgecolor" in values:
            spine.set_edgecolor(values["axes.edgecolor"])
        if "axes.linewidth" in values:
            spine.set_linewidth(values["axes.linewidth"])
        if PANEL_LINESTYLE_KEY in values:
            spine.set_linestyle(values[PANEL_LINESTYLE_KEY])


def _apply_ticks(ax: Axes, values: Mapping[str, Any]) -> None:
    for axis, side, label_side in (("x", "bottom", "labelbottom"), ("y", "left", "labelleft")):
        params: dict[str, Any] = {}
        if f"{axis}tick.color" in values:
            params["colors"] = values[f"{axis}tick.color"]
        if f"{axis}tick.labelsize" in values:
            params["labelsize"] = values[f"{axis}tick.labelsize"]
        if f"{axis}tick.major.width" in values:
            params["width"] = values[f"{axis}tick.major.width"]
        if f"{axis}tick.major.size" in values:
            params["length"] = values[f"{axis}tick.major.size"]
        if f"{axis}tick.{side}" in values:
            params[side] = bool(values[f"{axis}tick.{side}"])
        if f"{axis}tick.{label_side}" in values:
            params[label_side] = bool(values[f"{axis}tick.{label_side}"])
        if params:
            ax.tick_params(axis=axis, which="major", **params)


def _apply_text(ax: Axes, values: Mapping[str, Any]) -> None:
    for label in (ax.xaxis.label, ax.yaxis.label):
        if "axes.labelcolor" in values:
            label.set_color(values["axes.labelcolor"])
        if "axes.labelsize" in values:
            label.set_fontsize(values["axes.labelsize"])
        if "font.family" in values:
            label.set_fontfamily(values["font.family"])

    if "axes.titlecolor" in values:
        ax.title.set_color(values["axes.titlecolor"])
    if "axes.titlesize" in values:
        ax.title.set_fontsize(values["axes.titlesize"])
    if "axes.titleweight" in values:
        ax.title.set_fontweight(values["axes.titleweight"])
    if "font.family" in values:
        ax.title.set_fontfamily(values["font.family"])


def _apply_grid(ax: Axes, values: Mapping[str, Any]) -> None:
    if not any(key in values for key in ("axes.grid", GRID_MAJOR_KEY, GRID_MINOR_KEY)):
        return

    fallback = "xy" if values.get("axes.grid") else "none"
    major = _grid_directions(values, GRID_MAJOR_KEY, fallback)
    minor = _grid_directions(values, GRID_MINOR_KEY, "none")

    ax.grid(False, which="both")
    for axis in ("x", "y"):
        if axis in major:
            ax.grid(
                True,
                which="major",
                axis=axis,
                color=values.get("grid.color", LIGHT_GREY),
                linewidth=values.get("grid.linewidth", DEFAULT_MAJOR_GRID_WIDTH),
                linestyle=values.get("grid.linestyle", "-"),
            )
        if axis in minor:
            getattr(ax, f"{axis}axis").set_minor_locator(AutoMinorLocator())
            ax.grid(
                True,
                which="minor",
                axis=axis,
                color=values.get(GRID_MINOR_COLOR_KEY, LIGHT_GREY),
                linewidth=values.get(GRID_MINOR_WIDTH_KEY, DEFAULT_MINOR_GRID_WIDTH),
            )

    if "axes.axisbelow" in values:
        ax.set_axisbelow(values["axes.axisbelow"])


def _apply_legend(ax: Axes, values: Mapping[str, Any]) -> None:
    legend = ax.get_legend()
    if legend is None:
        return
    if "legend.frameon" in values:
        legend.set_frame_on(bool(values["legend.frameon"]))
    if "legend.fontsize" in values:
        for text in legend.get_texts():
            text.set_fontsize(values["legend.fontsize"])
    if "text.color" in values:
        for text in legend.get_texts():
            text.set_color(values["text.color"])


def apply_to_axes(ax: Axes, style: Mapping[str, Any]) -> None:
    """
    Restyle an existing Axes in place.

    Keys absent from `style` leave the corresponding artist untouched, so an
    overlay can be applied on its own after a theme was applied earlier.

    Parameters
    ----------
    ax
        Target axes.
    style
        Theme, overlay or composed style.

    Usage example
    -------------
        fig, ax = plt.subplots()
        ax.plot(x, y)
        apply_to_axes(ax, compose(theme_minimal_hgrid(), panel_border()))
    """
    _apply_spines(ax, style)
    _apply_ticks(ax, style)
    _apply_text(ax, style)
    _apply_grid(ax, style)
    _apply_legend(ax, style)
    if "axes.facecolor" in style:
        ax.set_facecolor(style["axes.facecolor"])


def apply_to_figure(fig: Figure, style: Mapping[str, Any]) -> None:
    """
    Restyle a figure and every Axes in it.

    Faceted figures get the style on each panel, so a panel border is drawn
    around every sub-plot.
    """
    if "figure.facecolor" in style:
        fig.patch.set_facecolor(style["figure.facecolor"])
    for ax in fig.axes:
        apply_to_axes(ax, style)
    logger.debug("Applied %s to figure with %d axes", getattr(style, "name", "style"), len(fig.axes))


def attach(target: Union[Axes, Figure], theme: Style, *overlays: Style) -> Style:
    """
    Compose `theme` with `overlays` (in order) and apply the result.

    Parameters
    ----------
    target
        An Axes, or a Figure whose axes should all be restyled.
    theme
        Base theme.
    *overlays
        Overlays layered after the theme.

    Returns
    -------
    Style
        The composed style that was applied.

    Usage example
    -------------
        fig, axes = plt.subplots(1, 2)
        attach(fig, theme_half_open(), background_grid(major="y"), panel_border())
    """
    style = compose(theme, *overlays)
    if isinstance(target, Figure):
        apply_to_figure(target, style)
    elif isinstance(target, Axes):
        apply_to_axes(target, style)
    else:
        raise TypeError(f"Expected a matplotlib Axes or Figure, got: {type(target)}")
    return style
