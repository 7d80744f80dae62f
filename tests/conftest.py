"""Shared pytest fixtures for the themekit test suite.

Figures are built on the Agg canvas so tests run headless, and every test
runs inside its own rcParams context so global style changes never leak.
"""

from pathlib import Path
import sys
from typing import Any

import matplotlib

matplotlib.use("Agg")

import matplotlib as mpl  # noqa: E402
import pytest  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

# Ensure `import themekit` resolves to the in-repo source tree during tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture(autouse=True)
def isolated_rcparams():
    """Restore rcParams after each test."""
    with mpl.rc_context():
        yield


@pytest.fixture
def figure() -> Figure:
    """Fresh single-axes figure."""
    fig = Figure()
    fig.add_subplot()
    return fig


@pytest.fixture
def faceted_figure() -> Figure:
    """Fresh figure with two side-by-side panels."""
    fig = Figure()
    fig.subplots(1, 2)
    return fig


@pytest.fixture
def sample_config_dict() -> dict[str, Any]:
    """Config payload with a theme and two overlays."""
    return {
        "theme": {"name": "minimal_hgrid", "font_size": 12},
        "overlays": [
            {"name": "background_grid", "major": "y", "minor": "y"},
            {"name": "panel_border", "color": "grey"},
        ],
    }
