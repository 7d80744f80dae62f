# ==================================================================================================
#                               Style composition
# ==================================================================================================
#
# Layer order is explicit: a list of styles merged left to right, later layers
# winning on shared keys. `compose` additionally checks that the list starts
# with exactly one theme followed by overlays only, so an overlay can never be
# silently clobbered by a theme applied after it.

import logging
from typing import Dict, List, Tuple

from themekit.errors import InvalidConfiguration
from themekit.themes.style import OVERLAY_LAYER, THEME_LAYER, Style

logger = logging.getLogger(__name__)


def merge(*layers: Style, name: str | None = None) -> Style:
    """
    Merge styles left to right without checking layer kinds.

    The result is a theme if the first layer is a theme, otherwise an overlay.

    Usage example
    -------------
        combined = merge(background_grid(major="x"), panel_border())
    """
    if not layers:
        raise InvalidConfiguration("layers", (), "at least one style is required")

    values: Dict[str, object] = {}
    for layer in layers:
        values.update(layer)

    # Repeated layer names appear once.
    merged_name = name or "+".join(dict.fromkeys(layer.name for layer in layers))
    return Style(merged_name, values, layer=layers[0].layer)


def compose(theme: Style, *overlays: Style) -> Style:
    """
    Layer overlays on top of a base theme.

    Parameters
    ----------
    theme
        Base theme (``layer == "theme"``).
    *overlays
        Overlays applied in the given order.

    Returns
    -------
    Style
        Theme-layer style. Keys only in `theme` keep the theme value, keys in
        any overlay take the value of the last overlay that sets them.

    Raises
    ------
    InvalidConfiguration
        If `theme` is not a theme or any overlay is a theme.

    Usage example
    -------------
        style = compose(theme_half_open(font_size=12), background_grid(major="y"), panel_border())
    """
    if not isinstance(theme, Style) or theme.layer != THEME_LAYER:
        raise InvalidConfiguration("theme", theme, "the first layer must be a theme preset")

    for index, overlay in enumerate(overlays):
        if not isinstance(overlay, Style) or overlay.layer != OVERLAY_LAYER:
            raise InvalidConfiguration(
                f"overlays[{index}]",
                overlay,
                "themes cannot be layered after another theme; apply them first",
            )

    result = merge(theme, *overlays)
    logger.debug("Composed %s (%d keys)", result.name, len(result))
    return result


def provenance(theme: Style, *overlays: Style) -> List[Tuple[str, object, str]]:
    """
    Return ``(key, value, source_layer_name)`` rows for the composed style.

    Usage example
    -------------
        for key, value, source in provenance(theme_half_open(), panel_border()):
            print(key, value, source)
    """
    composed = compose(theme, *overlays)
    sources: Dict[str, str] = {}
    for layer in (theme, *overlays):
        for key in layer:
            sources[key] = layer.name
    return [(key, composed[key], sources[key]) for key in sorted(composed)]
