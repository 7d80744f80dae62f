"""Wiring tests for `themekit.cli.commands.describe`."""

import argparse
from pathlib import Path

import pandas as pd

from themekit.cli.commands import describe as mod
from themekit.config import StyleConfig


def test_run_prints_table(capsys, sample_config_dict) -> None:
    args = argparse.Namespace(out=None)

    mod.run(args, StyleConfig(raw=sample_config_dict))

    out = capsys.readouterr().out
    assert "font.size" in out
    assert "minimal_hgrid" in out


def test_run_writes_tsv(tmp_path: Path, sample_config_dict) -> None:
    args = argparse.Namespace(out=tmp_path / "out" / "style.tsv")

    mod.run(args, StyleConfig(raw=sample_config_dict))

    df = pd.read_csv(args.out, sep="\t")
    assert df.loc[df["key"] == "axes.edgecolor", "source"].item() == "panel_border"


def test_add_subparser_registers_command() -> None:
    """Subparser registration should succeed with argparse registry."""
    parser = argparse.ArgumentParser(prog="themekit")
    subparsers = parser.add_subparsers(dest="command", required=True)

    mod.add_subparser(subparsers)
    args = parser.parse_args(["describe", "--config", "style.yaml"])

    assert args.out is None
