# ==================================================================================================
#                                CLI: gallery
# ==================================================================================================
#
# Command handler for: `themekit gallery ...`
#
# Renders a demo figure per theme with the config's overlays layered on top.
# No rendering logic belongs here.
#

# ==================================================================================================
# Imports
# ==================================================================================================
import argparse
from pathlib import Path
from typing import Any

from themekit.errors import ErrorPolicy
from themekit.themes.registry import layers_from_config, list_themes
from themekit.viz.gallery import DEFAULT_DPI, render_gallery


# ==================================================================================================
# Constants
# ==================================================================================================

LOG_NAME: str = "gallery.log"


# ==================================================================================================
# Subparser
# ==================================================================================================

def add_subparser(subparsers: Any) -> None:
    """
    Register the `gallery` subcommand.

    Parameters
    ----------
    subparsers
        Subparser registry from the top-level CLI.

    Usage example
    -------------
        # called internally by themekit.cli.main.build_arg_parser()
        add_subparser(subparsers)
    """
    parser = subparsers.add_parser(
        "gallery",
        help="Render a demo figure for each theme preset",
    )

    parser.add_argument("--config", type=Path, required=True, help="Path to style config YAML.")
    parser.add_argument("--out-dir", type=Path, required=True, help="Directory for PNGs and gallery.tsv.")
    parser.add_argument(
        "--themes",
        nargs="+",
        default=None,
        help="Theme names to render (default: all registered themes).",
    )
    parser.add_argument("--dpi", type=int, default=DEFAULT_DPI, help="Output resolution.")
    parser.add_argument("--debug", action="store_true", help="Stop at the first failing theme.")


# ==================================================================================================
# Runner
# ==================================================================================================

def run(args: argparse.Namespace, cfg) -> None:
    """
    Execute the `gallery` command.

    Parameters
    ----------
    args
        Parsed argparse namespace for this subcommand.
    cfg
        Style config (already loaded once in themekit.cli.main). Its theme
        options (everything but `name`) and overlays apply to every gallery
        entry; each entry brings its own theme preset.

    Usage example
    -------------
        # called internally by themekit.cli.main.main()
        run(args, cfg)
    """
    args.out_dir.mkdir(parents=True, exist_ok=True)
    _, overlays = layers_from_config(cfg)
    theme_options = cfg.theme_section()
    theme_options.pop("name", None)

    render_gallery(
        theme_names=args.themes or list_themes(),
        overlays=overlays,
        out_dir=args.out_dir,
        policy=ErrorPolicy(debug=bool(args.debug), log_path=args.out_dir / LOG_NAME),
        theme_options=theme_options,
        dpi=int(args.dpi),
    )
