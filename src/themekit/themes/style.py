# ==================================================================================================
#                                   Style
# ==================================================================================================
#
# Immutable style mapping shared by theme presets and overlays. Keys are
# matplotlib rcParams names plus a few axes-only keys (see
# `themekit.constants.AXES_ONLY_PREFIX`) that only `apply_to_axes` understands.

from types import MappingProxyType
from typing import Any, Dict, Iterator, Literal, Mapping

from themekit.constants import AXES_ONLY_PREFIX

Layer = Literal["theme", "overlay"]

THEME_LAYER: Layer = "theme"
OVERLAY_LAYER: Layer = "overlay"


class Style(Mapping[str, Any]):
    """
    Named, read-only mapping of style attributes.

    Parameters
    ----------
    name
        Preset or overlay name, e.g. ``"half_open"`` or ``"background_grid"``.
    values
        Style attributes. The mapping is copied, later changes to the
        caller's dict do not leak in.
    layer
        ``"theme"`` for complete base presets, ``"overlay"`` for partial
        decorators layered on top of a theme.

    Usage example
    -------------
        style = Style("custom", {"font.size": 12.0}, layer="overlay")
        style["font.size"]      # 12.0
        style.rc_params()       # {"font.size": 12.0}
    """

    __slots__ = ("_name", "_layer", "_values")

    def __init__(self, name: str, values: Mapping[str, Any], layer: Layer = THEME_LAYER) -> None:
        if layer not in (THEME_LAYER, OVERLAY_LAYER):
            raise ValueError(f"Unknown style layer: {layer!r}")
        self._name = str(name)
        self._layer: Layer = layer
        self._values = MappingProxyType(dict(values))

    @property
    def name(self) -> str:
        """Preset or overlay name."""
        return self._name

    @property
    def layer(self) -> Layer:
        """Either ``"theme"`` or ``"overlay"``."""
        return self._layer

    @property
    def is_theme(self) -> bool:
        """True for base presets."""
        return self._layer == THEME_LAYER

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        # Values only; name and layer are labels. Keeps equality transitive
        # across Styles and plain mappings.
        if isinstance(other, Mapping):
            return dict(self._values) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._values.keys())))

    def __repr__(self) -> str:
        return f"Style(name={self._name!r}, layer={self._layer!r}, keys={len(self._values)})"

    def rc_params(self) -> Dict[str, Any]:
        """Return only the matplotlib rcParams entries."""
        return {k: v for k, v in self._values.items() if not k.startswith(AXES_ONLY_PREFIX)}

    def axes_only(self) -> Dict[str, Any]:
        """Return only the entries that need an existing Axes to be applied."""
        return {k: v for k, v in self._values.items() if k.startswith(AXES_ONLY_PREFIX)}

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain, mutable copy of all entries."""
        return dict(self._values)
