"""Import smoke tests for package entrypoints and re-exports."""

from themekit import cli, themes, viz
from themekit.cli.types import CliCommand


def test_packages_import() -> None:
    """Top-level package namespaces should import without side effects."""
    assert cli is not None
    assert themes is not None
    assert viz is not None


def test_themes_package_reexports_public_api() -> None:
    """Everything listed in `__all__` should resolve."""
    for name in themes.__all__:
        assert hasattr(themes, name), name


def test_cli_protocol_exposes_expected_methods() -> None:
    """Protocol must define the command contract used by CLI registry."""
    assert hasattr(CliCommand, "add_subparser")
    assert hasattr(CliCommand, "run")
