"""Tests for theme option validation."""

import math

import numpy as np
import pytest

from themekit.errors import InvalidConfiguration
from themekit.themes.options import (
    ThemeOptions,
    check_choice,
    check_color,
    check_linestyle,
    check_positive,
)


def test_defaults_match_documented_values() -> None:
    opts = ThemeOptions()

    assert opts.font_size == 14
    assert opts.font_family == ""
    assert opts.color is None
    assert opts.small_size == pytest.approx(12.0)
    assert opts.large_size == pytest.approx(16.0)


@pytest.mark.parametrize("value", [0, -1, math.inf, math.nan, True, "12"])
def test_invalid_font_size_is_rejected(value) -> None:
    """Non-positive, non-finite, bool and string sizes fail immediately."""
    with pytest.raises(InvalidConfiguration) as excinfo:
        ThemeOptions(font_size=value)

    assert excinfo.value.option == "font_size"


def test_numpy_numbers_are_accepted() -> None:
    assert ThemeOptions(font_size=np.float64(11.5)).font_size == 11.5


def test_invalid_color_is_rejected() -> None:
    with pytest.raises(InvalidConfiguration, match="color"):
        ThemeOptions(color="not-a-colour")


def test_font_family_must_be_string() -> None:
    with pytest.raises(InvalidConfiguration, match="font_family"):
        ThemeOptions(font_family=12)  # type: ignore[arg-type]


def test_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(InvalidConfiguration, match="unknown keys"):
        ThemeOptions.from_mapping({"font_size": 12, "fontsize": 12})


def test_resolve_color_prefers_configured_value() -> None:
    assert ThemeOptions().resolve_color("black") == "black"
    assert ThemeOptions(color="navy").resolve_color("black") == "navy"


def test_validators() -> None:
    assert check_positive("w", 0, allow_zero=True) == 0.0
    assert check_color("c", "#d9d9d9") == "#d9d9d9"
    assert check_choice("major", "xy", ("xy", "none")) == "xy"
    assert check_linestyle("ls", "--") == "--"
    assert check_linestyle("ls", "dotted") == "dotted"
    with pytest.raises(InvalidConfiguration):
        check_linestyle("ls", "wiggly")
    with pytest.raises(InvalidConfiguration):
        check_choice("major", "z", ("xy", "none"))
