"""Tests for theme/overlay lookup and config-driven composition."""

import pytest

from themekit.config import StyleConfig
from themekit.constants import GRID_MINOR_KEY
from themekit.errors import InvalidConfiguration, UnknownPreset
from themekit.themes import registry as mod


def test_list_themes_and_descriptions_agree() -> None:
    names = mod.list_themes()

    assert "half_open" in names
    assert set(mod.list_themes_with_descriptions()) == set(names)
    assert mod.list_overlays() == ["background_grid", "panel_border"]


@pytest.mark.parametrize("name", ["half_open", "theme_half_open", "HALF-OPEN", "cowplot", ""])
def test_get_theme_normalizes_names(name) -> None:
    assert mod.get_theme(name).name == "half_open"


def test_get_theme_forwards_options() -> None:
    style = mod.get_theme("minimal_grid", font_size=9, color="navy")

    assert style["font.size"] == 9
    assert style["grid.color"] == "navy"


def test_get_theme_rejects_unknown_name_and_options() -> None:
    with pytest.raises(UnknownPreset, match="available"):
        mod.get_theme("fancy")
    with pytest.raises(InvalidConfiguration, match="unknown keys"):
        mod.get_theme("map", size=3)


def test_get_overlay_rejects_unknown_name_and_options() -> None:
    with pytest.raises(UnknownPreset):
        mod.get_overlay("drop_shadow")
    with pytest.raises(InvalidConfiguration, match="background_grid options"):
        mod.get_overlay("background_grid", colour="red")


def test_style_from_config_composes_in_file_order(sample_config_dict) -> None:
    style = mod.style_from_config(StyleConfig(raw=sample_config_dict))

    assert style["font.size"] == 12
    assert style[GRID_MINOR_KEY] == "y"
    assert style["axes.edgecolor"] == "grey"
    assert style["axes.spines.top"] is True


def test_style_from_config_defaults_to_half_open() -> None:
    style = mod.style_from_config(StyleConfig(raw={}))

    assert style == mod.get_theme("half_open")


def test_layers_from_config_does_not_mutate_raw(sample_config_dict) -> None:
    cfg = StyleConfig(raw=sample_config_dict)

    mod.layers_from_config(cfg)

    assert cfg.raw["theme"]["name"] == "minimal_hgrid"
    assert cfg.raw["overlays"][0]["name"] == "background_grid"
