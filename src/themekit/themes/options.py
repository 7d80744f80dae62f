# ==================================================================================================
#                               Theme options
# ==================================================================================================
#
# The configuration record accepted by every theme factory, plus the small
# validators shared with overlays. All checks run at construction time and
# raise `InvalidConfiguration`, so a bad value never reaches matplotlib.

import numbers
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Sequence

import numpy as np
from matplotlib.colors import is_color_like
from matplotlib.lines import Line2D

from themekit.constants import (
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_WIDTH,
    DEFAULT_REL_LARGE,
    DEFAULT_REL_SMALL,
)
from themekit.errors import InvalidConfiguration


# ==================================================================================================
#                                   VALIDATORS
# ==================================================================================================

def check_positive(option: str, value: Any, *, allow_zero: bool = False) -> float:
    """
    Validate a finite, positive real number and return it as float.

    Booleans are rejected even though they are `int` subclasses.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfiguration(option, value, "expected a number")
    number = float(value)
    if not np.isfinite(number):
        raise InvalidConfiguration(option, value, "must be finite")
    if number < 0 or (number == 0 and not allow_zero):
        raise InvalidConfiguration(option, value, "must be positive" if not allow_zero else "must be >= 0")
    return number


def check_color(option: str, value: Any) -> str:
    """Validate a matplotlib colour specification (name, hex, grey level string)."""
    if not isinstance(value, str) or not is_color_like(value):
        raise InvalidConfiguration(option, value, "expected a matplotlib color")
    return value


def check_choice(option: str, value: Any, choices: Sequence[str]) -> str:
    """Validate that `value` is one of `choices`."""
    if value not in choices:
        raise InvalidConfiguration(option, value, f"expected one of {', '.join(map(repr, choices))}")
    return value


def check_linestyle(option: str, value: Any) -> str:
    """Validate a named or short-hand matplotlib line style."""
    allowed = set(Line2D.lineStyles) | {"solid", "dashed", "dashdot", "dotted"}
    if not isinstance(value, str) or value not in allowed:
        raise InvalidConfiguration(option, value, "expected a matplotlib line style such as '-' or 'dashed'")
    return value


# ==================================================================================================
#                                   TYPES
# ==================================================================================================

@dataclass(frozen=True)
class ThemeOptions:
    """
    Options shared by all theme presets.

    Attributes
    ----------
    font_size : float
        Base font size in points.
    font_family : str
        Font family name. Empty string keeps matplotlib's default family.
    color : str | None
        Preset-specific colour (ink for `half_open`, grid lines for the
        minimal presets). None selects the preset default.
    line_width : float
        Width of axis lines and tick marks, in points.
    rel_small : float
        Tick label and legend text size relative to `font_size`.
    rel_large : float
        Title size relative to `font_size`.

    Usage example
    -------------
        opts = ThemeOptions(font_size=12, font_family="DejaVu Sans")
        opts.small_size  # 12 * 12/14
    """

    font_size: float = DEFAULT_FONT_SIZE
    font_family: str = ""
    color: Optional[str] = None
    line_width: float = DEFAULT_LINE_WIDTH
    rel_small: float = DEFAULT_REL_SMALL
    rel_large: float = DEFAULT_REL_LARGE

    def __post_init__(self) -> None:
        check_positive("font_size", self.font_size)
        if not isinstance(self.font_family, str):
            raise InvalidConfiguration("font_family", self.font_family, "expected a string")
        if self.color is not None:
            check_color("color", self.color)
        check_positive("line_width", self.line_width)
        check_positive("rel_small", self.rel_small)
        check_positive("rel_large", self.rel_large)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ThemeOptions":
        """
        Build options from a config record, rejecting unknown keys.

        Usage example
        -------------
            ThemeOptions.from_mapping({"font_size": 11, "color": "grey"})
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise InvalidConfiguration("theme options", unknown, f"unknown keys; expected any of {sorted(known)}")
        return cls(**dict(mapping))

    def resolve_color(self, default: str) -> str:
        """Return the configured colour or the preset default."""
        return self.color if self.color is not None else default

    @property
    def small_size(self) -> float:
        return self.font_size * self.rel_small

    @property
    def large_size(self) -> float:
        return self.font_size * self.rel_large
