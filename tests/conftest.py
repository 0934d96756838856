"""Shared pytest fixtures for kindchain tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from kindchain.config.logging import PACKAGE_LOGGER


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep KINDCHAIN_* variables from the host out of every test."""
    for name in ("CONFIG", "SEPARATOR", "VERBOSE", "LOG_JSON"):
        monkeypatch.delenv(f"KINDCHAIN_{name}", raising=False)


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory used as CWD, with no config file."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def styled_project(project_root: Path) -> Path:
    """Project directory whose kindchain.toml defines a few values."""
    (project_root / "kindchain.toml").write_text(
        '[values]\nrect = "blue"\ngeneral = "gray"\n',
        encoding="utf-8",
    )
    return project_root


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the handler the CLI installs on the package logger."""
    package = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = package.handlers[:], package.level, package.propagate
    yield
    package.handlers = handlers
    package.setLevel(level)
    package.propagate = propagate
