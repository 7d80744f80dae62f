# ==================================================================================================
#                               Theme gallery
# ==================================================================================================
#
# Renders one faceted demo figure per theme so presets can be compared side by
# side. Rendering uses the Agg canvas directly (no pyplot state), and each
# theme runs as its own step under an `ErrorPolicy`: in run mode a failing
# theme is recorded in the manifest and the batch continues.

import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from themekit.errors import ErrorPolicy, run_step
from themekit.themes.apply import apply_to_figure, style_context
from themekit.themes.compose import compose
from themekit.themes.registry import get_theme
from themekit.themes.style import Style

logger = logging.getLogger(__name__)

# ==================================================================================================
# Constants
# ==================================================================================================

DEFAULT_SEED: int = 7
DEFAULT_N_POINTS: int = 40
DEFAULT_DPI: int = 100
FIGSIZE_IN: tuple[float, float] = (8.0, 3.5)
MANIFEST_NAME: str = "gallery.tsv"
MANIFEST_COLUMNS: tuple[str, ...] = ("theme", "status", "path", "error")


# ==================================================================================================
# Helpers
# ==================================================================================================

def demo_data(seed: int = DEFAULT_SEED, n_points: int = DEFAULT_N_POINTS) -> dict[str, np.ndarray]:
    """
    Small two-group dataset for the demo facets.

    Returns
    -------
    dict[str, numpy.ndarray]
        Keys ``x``, ``y_a`` and ``y_b``; all arrays have `n_points` entries.
    """
    rng = np.random.default_rng(seed)
    x = np.linspace(0.0, 10.0, n_points)
    return {
        "x": x,
        "y_a": 0.8 * x + rng.normal(0.0, 1.0, n_points),
        "y_b": 5.0 + 0.3 * x + rng.normal(0.0, 1.5, n_points),
    }


def build_demo_figure(style: Style, data: dict[str, np.ndarray]) -> Figure:
    """
    Build the two-panel demo figure with `style` applied.

    The style is active while the figure is created (rcParams) and is applied
    again to the finished axes, which covers the axes-only keys.
    """
    with style_context(style):
        fig = Figure(figsize=FIGSIZE_IN)
        FigureCanvasAgg(fig)
        axes = fig.subplots(1, 2, sharey=True)
        for ax, key, label in zip(axes, ("y_a", "y_b"), ("group A", "group B")):
            ax.scatter(data["x"], data[key], s=12, label=label)
            ax.set_title(label)
            ax.set_xlabel("x")
        axes[0].set_ylabel("y")
        axes[1].legend()
        fig.suptitle(style.name)
        fig.tight_layout()
    apply_to_figure(fig, style)
    return fig


def render_demo(style: Style, out_path: Path, *, dpi: int = DEFAULT_DPI) -> Path:
    """Render the demo figure for `style` to a PNG file and return its path."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig = build_demo_figure(style, demo_data())
    fig.savefig(out_path, dpi=dpi, facecolor=fig.get_facecolor())
    logger.info("Rendered %s -> %s", style.name, out_path)
    return out_path


def _render_theme(
    theme_name: str,
    theme_options: Mapping[str, Any],
    overlays: Sequence[Style],
    out_dir: Path,
    dpi: int,
) -> Path:
    style = compose(get_theme(theme_name, **theme_options), *overlays)
    return render_demo(style, out_dir / f"{theme_name}.png", dpi=dpi)


# ==================================================================================================
# Core logic
# ==================================================================================================

def render_gallery(
    theme_names: Sequence[str],
    overlays: Sequence[Style],
    out_dir: Path,
    *,
    policy: ErrorPolicy,
    theme_options: Mapping[str, Any] | None = None,
    dpi: int = DEFAULT_DPI,
) -> pd.DataFrame:
    """
    Render one demo PNG per theme and write a manifest TSV.

    Parameters
    ----------
    theme_names
        Registered theme names to render.
    overlays
        Overlays layered on top of every theme, in order.
    out_dir
        Output directory for PNGs and the manifest.
    policy
        Error policy; debug mode stops at the first failing theme.
    theme_options
        `ThemeOptions` fields (font size, colour, ...) passed to every theme.
    dpi
        Output resolution.

    Returns
    -------
    pandas.DataFrame
        Manifest with columns ``theme``, ``status``, ``path``, ``error``.

    Usage example
    -------------
        policy = ErrorPolicy(debug=False, log_path=Path("figs/gallery.log"))
        manifest = render_gallery(list_themes(), [panel_border()], Path("figs"), policy=policy)
    """
    options = dict(theme_options or {})
    rows = []
    for theme_name in theme_names:
        result = run_step(
            policy,
            f"render:{theme_name}",
            {"theme": theme_name, "overlays": [o.name for o in overlays], "options": options, "out_dir": str(out_dir)},
            _render_theme,
            theme_name,
            options,
            overlays,
            out_dir,
            dpi,
        )
        if result.failure is not None:
            rows.append((theme_name, "failed", "", f"{result.failure.exc_type}: {result.failure.message}"))
        else:
            rows.append((theme_name, "ok", str(result.value), ""))

    manifest = pd.DataFrame(rows, columns=list(MANIFEST_COLUMNS))
    out_dir.mkdir(parents=True, exist_ok=True)
    manifest.to_csv(out_dir / MANIFEST_NAME, sep="\t", index=False)
    return manifest
