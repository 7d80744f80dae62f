# ==================================================================================================
#                                   CLI
# ==================================================================================================
#
# Entry point for the `themekit` command-line interface.
#
# This module is a thin dispatcher:
# - parse global + subcommand arguments
# - configure logging and load the style config once
# - call a single library function per subcommand
#
# Theme logic must live in `themekit.themes` / `themekit.viz`, not here.
#
# ==================================================================================================
# Imports
# ==================================================================================================

import argparse
import logging
from pathlib import Path
from typing import Dict, Sequence

from themekit.config import load_style_config
from themekit.cli.types import CliCommand
from themekit.logging import configure_logging

from themekit.cli.commands import (  # noqa: F401
    describe as cmd_describe,
    gallery as cmd_gallery,
)


# ==================================================================================================
# Command registry
# ==================================================================================================

_COMMANDS: Dict[str, CliCommand] = {
    "describe": cmd_describe,
    "gallery": cmd_gallery,
}


# ==================================================================================================
# Argument parsing
# ==================================================================================================

def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the top-level CLI parser with subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser.

    Usage example
    -------------
        themekit describe --config style.yaml --out style.tsv

        themekit --verbose gallery --config style.yaml --out-dir figs --themes half_open minimal_grid
    """
    parser = argparse.ArgumentParser(
        prog="themekit",
        description="Theme presets and overlays for matplotlib charts",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="<command>")

    for name, module in _COMMANDS.items():
        if not hasattr(module, "add_subparser"):
            raise RuntimeError(f"CLI command module for '{name}' is missing add_subparser().")
        module.add_subparser(subparsers)

    return parser


# ==================================================================================================
# Entry point
# ==================================================================================================

def main(argv: Sequence[str] | None = None) -> None:
    """
    CLI entry point.

    Parameters
    ----------
    argv
        Optional argv for testing. If None, reads from sys.argv.

    Returns
    -------
    None

    Usage example
    -------------
        main(["describe", "--config", "style.yaml"])
    """
    parser = build_arg_parser()
    args = parser.parse_args(argv)  # noqa

    configure_logging(logging.DEBUG if getattr(args, "verbose", False) else logging.INFO)

    # Every subcommand requires --config (enforced by handlers)
    if not hasattr(args, "config"):
        raise RuntimeError("Internal error: subcommand args missing --config.")

    cfg = load_style_config(Path(args.config))

    command_name = str(args.command)
    module = _COMMANDS.get(command_name)
    if module is None:
        raise RuntimeError(f"Unknown command: {command_name}")

    if not hasattr(module, "run"):
        raise RuntimeError(f"CLI command module for '{command_name}' is missing run().")

    module.run(args, cfg)


if __name__ == "__main__":
    main()
