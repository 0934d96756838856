"""Tests for the root kindchain CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from kindchain import __version__
from kindchain.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "kindchain" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("project_root")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize(
    "flag",
    [["--json"], ["-q"], ["-v"], ["--log-json"], ["-s", "."]],
)
def test_global_flags_accepted(cli_runner: CliRunner, flag: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flag, "--version"])
    assert result.exit_code == 0


@pytest.mark.usefixtures("project_root")
def test_bad_separator_is_usage_error(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-s", "::", "inspect", "a"])
    assert result.exit_code == 2
    assert "Invalid configuration" in result.output


def test_invalid_toml_reported(cli_runner: CliRunner, project_root: Path) -> None:
    (project_root / "kindchain.toml").write_text("[kinds\n")
    result = cli_runner.invoke(cli, ["inspect", "a"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


class TestConfigOption:
    def test_explicit_file_is_used(self, cli_runner: CliRunner, project_root: Path) -> None:
        custom = project_root / "styles.toml"
        custom.write_text('[values]\nrect = "teal"\n')
        result = cli_runner.invoke(cli, ["-c", str(custom), "-q", "resolve", "a/rect"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "teal"

    def test_missing_file_is_usage_error(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-c", str(project_root / "nope.toml"), "inspect", "a"])
        assert result.exit_code == 2
        assert "does not exist" in result.output

    def test_directory_is_rejected(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-c", str(project_root), "inspect", "a"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("project_root")
def test_env_separator_validated(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KINDCHAIN_SEPARATOR", "--")
    result = cli_runner.invoke(cli, ["inspect", "a"])
    assert result.exit_code == 2
    assert "exactly one character" in result.output


def test_path_keys_in_config(cli_runner: CliRunner, project_root: Path) -> None:
    (project_root / "kindchain.toml").write_text(
        '[kinds]\nseparator = "."\n[values]\n"rectCorner.rect" = "red"\nrect = "blue"\n'
    )
    result = cli_runner.invoke(cli, ["-q", "resolve", "upperLeft.rectCorner.rect"])
    assert result.stdout.strip() == "red"
