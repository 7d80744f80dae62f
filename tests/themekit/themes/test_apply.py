"""Tests for attaching styles to matplotlib rcParams and existing artists."""

import matplotlib as mpl
import pytest
from matplotlib.colors import same_color

from themekit.constants import LIGHT_GREY
from themekit.errors import InvalidConfiguration
from themekit.themes.apply import apply_to_axes, apply_to_figure, attach, style_context, use_style
from themekit.themes.compose import compose
from themekit.themes.overlays import background_grid, panel_border
from themekit.themes.presets import theme_half_open, theme_minimal_grid, theme_minimal_hgrid, theme_nothing


def _gridlines_visible(axis) -> bool:
    return all(line.get_visible() for line in axis.get_gridlines())


def _gridlines_hidden(axis) -> bool:
    return not any(line.get_visible() for line in axis.get_gridlines())


def test_style_context_is_temporary() -> None:
    before = mpl.rcParams["axes.spines.top"]

    with style_context(theme_half_open(font_size=11)):
        assert mpl.rcParams["font.size"] == 11
        assert mpl.rcParams["axes.spines.top"] is False

    assert mpl.rcParams["axes.spines.top"] == before


def test_use_style_updates_global_rcparams() -> None:
    use_style(compose(theme_half_open(), background_grid(major="y")))

    assert mpl.rcParams["axes.grid"] is True
    assert mpl.rcParams["axes.grid.axis"] == "y"


def test_apply_to_axes_half_open_spines(figure) -> None:
    ax = figure.axes[0]

    apply_to_axes(ax, theme_half_open(color="navy"))

    assert ax.spines["left"].get_visible()
    assert ax.spines["bottom"].get_visible()
    assert not ax.spines["top"].get_visible()
    assert not ax.spines["right"].get_visible()
    assert same_color(ax.spines["left"].get_edgecolor(), "navy")
    assert _gridlines_hidden(ax.xaxis)
    assert _gridlines_hidden(ax.yaxis)


def test_apply_to_axes_hgrid_draws_horizontal_lines_only(figure) -> None:
    ax = figure.axes[0]

    apply_to_axes(ax, theme_minimal_hgrid())

    assert _gridlines_visible(ax.yaxis)
    assert _gridlines_hidden(ax.xaxis)
    assert same_color(ax.yaxis.get_gridlines()[0].get_color(), LIGHT_GREY)


def test_apply_to_axes_minor_grid(figure) -> None:
    ax = figure.axes[0]

    apply_to_axes(ax, compose(theme_half_open(), background_grid(major="none", minor="y", minor_color="red")))

    minor_ticks = ax.yaxis.get_minor_ticks()
    assert minor_ticks
    assert all(tick.gridline.get_visible() for tick in minor_ticks)
    assert same_color(minor_ticks[0].gridline.get_color(), "red")
    assert _gridlines_hidden(ax.yaxis)


def test_overlay_applied_alone_keeps_theme_settings(figure) -> None:
    """Keys missing from an overlay leave the earlier theme's artists alone."""
    ax = figure.axes[0]
    apply_to_axes(ax, theme_minimal_grid())

    apply_to_axes(ax, panel_border(color="red"))

    assert _gridlines_visible(ax.xaxis)
    assert all(spine.get_visible() for spine in ax.spines.values())


def test_apply_to_axes_updates_legend(figure) -> None:
    ax = figure.axes[0]
    ax.plot([0, 1], [0, 1], label="a")
    ax.legend()

    apply_to_axes(ax, theme_half_open(font_size=10))

    assert ax.get_legend().get_frame_on() is False
    assert ax.get_legend().get_texts()[0].get_fontsize() == pytest.approx(10 * 12 / 14)


def test_apply_does_not_touch_data(figure) -> None:
    ax = figure.axes[0]
    (line,) = ax.plot([0, 1, 2], [3, 4, 5])

    apply_to_axes(ax, compose(theme_nothing(), background_grid()))

    assert list(line.get_ydata()) == [3, 4, 5]


def test_attach_borders_every_facet(faceted_figure) -> None:
    style = attach(faceted_figure, theme_half_open(), background_grid(major="y"), panel_border(color="grey"))

    assert style["axes.edgecolor"] == "grey"
    for ax in faceted_figure.axes:
        assert all(spine.get_visible() for spine in ax.spines.values())
        assert same_color(ax.spines["top"].get_edgecolor(), "grey")
        assert _gridlines_visible(ax.yaxis)


def test_attach_to_single_axes(figure) -> None:
    ax = figure.axes[0]

    attach(ax, theme_minimal_grid())

    assert not any(spine.get_visible() for spine in ax.spines.values())


def test_attach_enforces_layer_order(figure) -> None:
    with pytest.raises(InvalidConfiguration):
        attach(figure, background_grid(), theme_half_open())


def test_attach_rejects_non_matplotlib_targets() -> None:
    with pytest.raises(TypeError, match="Axes or Figure"):
        attach(object(), theme_half_open())  # type: ignore[arg-type]


def test_apply_to_figure_sets_facecolor(figure) -> None:
    apply_to_figure(figure, theme_nothing())

    assert figure.patch.get_facecolor()[3] == 0.0
