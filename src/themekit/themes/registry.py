"""Theme and overlay registry.

Looks presets and overlays up by name, and turns a loaded `StyleConfig`
into a composed style.
"""

import inspect
from typing import Any, Callable, Dict, List, Tuple

from themekit.config import StyleConfig
from themekit.errors import InvalidConfiguration, UnknownPreset
from themekit.themes.compose import compose
from themekit.themes.options import ThemeOptions
from themekit.themes.overlays import background_grid, panel_border
from themekit.themes.presets import (
    theme_half_open,
    theme_map,
    theme_minimal_grid,
    theme_minimal_hgrid,
    theme_minimal_vgrid,
    theme_nothing,
)
from themekit.themes.style import Style

DEFAULT_THEME: str = "half_open"

# name -> (factory, description)
_THEMES: Dict[str, Tuple[Callable[..., Style], str]] = {
    "half_open": (theme_half_open, "Left and bottom axis lines, no grid; the classic publication look"),
    "minimal_grid": (theme_minimal_grid, "Full light background grid, no axis lines or tick marks"),
    "minimal_hgrid": (theme_minimal_hgrid, "Horizontal grid lines with an x axis line"),
    "minimal_vgrid": (theme_minimal_vgrid, "Vertical grid lines with a y axis line"),
    "map": (theme_map, "No axis lines, ticks or grid; titles and legends kept"),
    "nothing": (theme_nothing, "Nothing but the data"),
}

_ALIASES: Dict[str, str] = {"cowplot": "half_open"}

_OVERLAYS: Dict[str, Callable[..., Style]] = {
    "background_grid": background_grid,
    "panel_border": panel_border,
}


def _normalize(name: str) -> str:
    key = str(name).strip().lower().replace("-", "_")
    if key.startswith("theme_"):
        key = key[len("theme_"):]
    return _ALIASES.get(key, key)


def get_theme(name: str = DEFAULT_THEME, **options: Any) -> Style:
    """
    Build a theme by name.

    Parameters
    ----------
    name
        Preset name (``half_open``, ``minimal_grid``, ...). A ``theme_``
        prefix and dashes are accepted.
    **options
        Any `ThemeOptions` field.

    Returns
    -------
    Style
        Theme-layer style.

    Raises
    ------
    UnknownPreset
        If the name is not registered.
    InvalidConfiguration
        If an option is unknown or invalid.

    Usage example
    -------------
        theme = get_theme("minimal-hgrid", font_size=12)
    """
    key = _normalize(name or DEFAULT_THEME)
    entry = _THEMES.get(key)
    if entry is None:
        raise UnknownPreset("theme", name, _THEMES.keys())
    factory, _ = entry
    opts = ThemeOptions.from_mapping(options)
    return factory(
        font_size=opts.font_size,
        font_family=opts.font_family,
        color=opts.color,
        line_width=opts.line_width,
        rel_small=opts.rel_small,
        rel_large=opts.rel_large,
    )


def list_themes() -> List[str]:
    """Get a list of available theme names."""
    return list(_THEMES.keys())


def list_themes_with_descriptions() -> Dict[str, str]:
    """Get a dictionary of theme names to their descriptions."""
    return {name: description for name, (_, description) in _THEMES.items()}


def get_overlay(name: str, **options: Any) -> Style:
    """
    Build an overlay by name, forwarding `options` as keyword arguments.

    Raises
    ------
    UnknownPreset
        If the name is not registered.
    InvalidConfiguration
        If an option is unknown or its value is invalid.

    Usage example
    -------------
        grid = get_overlay("background_grid", major="y")
    """
    factory = _OVERLAYS.get(str(name).strip().lower().replace("-", "_"))
    if factory is None:
        raise UnknownPreset("overlay", name, _OVERLAYS.keys())
    try:
        return factory(**options)
    except TypeError as exc:
        expected = sorted(inspect.signature(factory).parameters)
        raise InvalidConfiguration(f"{name} options", sorted(options), f"expected any of {expected}") from exc


def list_overlays() -> List[str]:
    """Get a list of available overlay names."""
    return list(_OVERLAYS.keys())


def layers_from_config(cfg: StyleConfig) -> Tuple[Style, List[Style]]:
    """
    Build the base theme and the ordered overlays described by `cfg`.

    Usage example
    -------------
        theme, overlays = layers_from_config(load_style_config(Path("style.yaml")))
    """
    theme_section = cfg.theme_section()
    name = theme_section.pop("name", DEFAULT_THEME)
    theme = get_theme(name, **theme_section)

    overlays = []
    for section in cfg.overlay_sections():
        overlay_name = section.pop("name")
        overlays.append(get_overlay(overlay_name, **section))
    return theme, overlays


def style_from_config(cfg: StyleConfig) -> Style:
    """Compose the theme and overlays described by `cfg`, in file order."""
    theme, overlays = layers_from_config(cfg)
    return compose(theme, *overlays)
