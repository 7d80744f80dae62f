# ==================================================================================================
#                                CLI: describe
# ==================================================================================================
#
# Command handler for: `themekit describe ...`
#
# Responsibilities
# ----------------
# - define subcommand arguments (add_subparser)
# - build the configured theme + overlays and print or save the style table (run)
#

# ==================================================================================================
# Imports
# ==================================================================================================
import argparse
from pathlib import Path
from typing import Any

from themekit.themes.registry import layers_from_config
from themekit.viz.table import style_table, write_tsv


# ==================================================================================================
# Subparser
# ==================================================================================================

def add_subparser(subparsers: Any) -> None:
    """
    Register the `describe` subcommand.

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
        "describe",
        help="Show the composed style (key, value, source layer) for a config",
    )

    parser.add_argument("--config", type=Path, required=True, help="Path to style config YAML.")
    parser.add_argument("--out", type=Path, default=None, help="Write the table as TSV instead of printing it.")


# ==================================================================================================
# Runner
# ==================================================================================================

def run(args: argparse.Namespace, cfg) -> None:
    """
    Execute the `describe` command.

    Parameters
    ----------
    args
        Parsed argparse namespace for this subcommand.
    cfg
        Style config (already loaded once in themekit.cli.main).

    Usage example
    -------------
        # called internally by themekit.cli.main.main()
        run(args, cfg)
    """
    theme, overlays = layers_from_config(cfg)
    table = style_table(theme, *overlays)

    if args.out is None:
        print(table.to_string(index=False))
    else:
        write_tsv(table, args.out)
