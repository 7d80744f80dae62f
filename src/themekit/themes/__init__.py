"""Theme presets, decorator overlays and their composition for matplotlib."""

from .apply import apply_to_axes, apply_to_figure, attach, style_context, use_style
from .compose import compose, merge, provenance
from .options import ThemeOptions
from .overlays import background_grid, panel_border
from .presets import (
    theme_cowplot,
    theme_half_open,
    theme_map,
    theme_minimal_grid,
    theme_minimal_hgrid,
    theme_minimal_vgrid,
    theme_nothing,
)
from .registry import (
    get_overlay,
    get_theme,
    layers_from_config,
    list_overlays,
    list_themes,
    list_themes_with_descriptions,
    style_from_config,
)
from .style import Style

__all__ = [
    "Style",
    "ThemeOptions",
    "apply_to_axes",
    "apply_to_figure",
    "attach",
    "background_grid",
    "compose",
    "get_overlay",
    "get_theme",
    "layers_from_config",
    "list_overlays",
    "list_themes",
    "list_themes_with_descriptions",
    "merge",
    "panel_border",
    "provenance",
    "style_context",
    "style_from_config",
    "theme_cowplot",
    "theme_half_open",
    "theme_map",
    "theme_minimal_grid",
    "theme_minimal_hgrid",
    "theme_minimal_vgrid",
    "theme_nothing",
    "use_style",
]
