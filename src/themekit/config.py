# ==================================================================================================
#                               Config loading
# ==================================================================================================
#
# Single entry point for reading a style configuration file from disk.
#
# A config file names the base theme, its options, and the ordered list of
# overlays to layer on top of it:
#
#   theme:
#     name: minimal_hgrid
#     font_size: 12
#   overlays:
#     - name: panel_border
#       color: grey
#
# This module only loads and packages raw data. Turning it into a composed
# style happens in `themekit.themes.registry.style_from_config`.

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml


# ==================================================================================================
#                                   TYPES
# ==================================================================================================

@dataclass(frozen=True, slots=True)
class StyleConfig:
    """
    Parsed style configuration.

    Parameters
    ----------
    raw
        Raw config dictionary loaded from YAML.

    Usage example
    -------------
        cfg = load_style_config(Path("style.yaml"))
        theme_name = cfg.theme_section().get("name", "half_open")
    """

    raw: Dict[str, Any]

    def theme_section(self) -> Dict[str, Any]:
        """Return the `theme` mapping (empty when absent)."""
        section = self.raw.get("theme") or {}
        if not isinstance(section, Mapping):
            raise ValueError(f"Config 'theme' must be a mapping, got: {type(section)}")
        return dict(section)

    def overlay_sections(self) -> List[Dict[str, Any]]:
        """Return the ordered `overlays` list (empty when absent)."""
        sections = self.raw.get("overlays") or []
        if not isinstance(sections, list):
            raise ValueError(f"Config 'overlays' must be a list, got: {type(sections)}")
        for index, section in enumerate(sections):
            if not isinstance(section, Mapping) or "name" not in section:
                raise ValueError(f"Config overlay #{index} must be a mapping with a 'name' key")
        return [dict(section) for section in sections]


# ==================================================================================================
#                                   IO
# ==================================================================================================

def load_style_config(config_path: Path) -> StyleConfig:
    """
    Load YAML config into a StyleConfig object.

    Parameters
    ----------
    config_path
        Path to YAML config file.

    Returns
    -------
    StyleConfig
        Loaded configuration.

    Usage example
    -------------
        cfg = load_style_config(Path("style.yaml"))
        print(cfg.raw["theme"]["name"])
    """
    with config_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults".
    if data is None:
        data = {}

    if not isinstance(data, Mapping):
        raise ValueError(f"Config must be a mapping at top-level, got: {type(data)}")

    return StyleConfig(raw=dict(data))
