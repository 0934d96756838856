"""Locate, read and merge kindchain configuration.

``load_settings`` layers, highest first:

1. Flags passed on the command line
2. ``KINDCHAIN_*`` environment variables (:class:`EnvironmentSettings`)
3. ``kindchain.toml``, from ``-c``, ``KINDCHAIN_CONFIG`` or the nearest
   parent directory of the working directory
4. Defaults declared on the models
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import click
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from kindchain.config.models import KindchainConfig, KindsConfig

CONFIG_FILENAME = "kindchain.toml"


class EnvironmentSettings(BaseSettings):
    """Overrides read from ``KINDCHAIN_*`` variables."""

    model_config = SettingsConfigDict(env_prefix="KINDCHAIN_", frozen=True)

    config: Path | None = None
    separator: str | None = None
    verbose: bool = False
    log_json: bool = False


def find_config(
    start: Path | None = None, *, env: EnvironmentSettings | None = None
) -> Path | None:
    """Return the config file for *start*, or ``None``.

    ``KINDCHAIN_CONFIG`` wins when it names an existing file; otherwise
    *start* (default: cwd) and its parents are searched in order.
    """
    env = env or EnvironmentSettings()
    if env.config is not None:
        return env.config if env.config.is_file() else None
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None) -> KindchainConfig:
    """Parse the TOML file at *path*; ``None`` yields the defaults.

    Raises:
        click.ClickException: the file is not valid TOML.
        pydantic.ValidationError: a section holds an invalid value.
    """
    if path is None:
        return KindchainConfig()
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
    return KindchainConfig.model_validate(data)


class KindchainSettings(BaseModel):
    """Everything one CLI invocation needs, merged and frozen."""

    model_config = {"frozen": True}

    config_path: Path | None = None
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    config: KindchainConfig = Field(default_factory=KindchainConfig)

    @property
    def separator(self) -> str:
        return self.config.kinds.separator

    @property
    def values(self) -> dict[str, str]:
        return self.config.values


def load_settings(
    config_path: Path | None = None,
    *,
    separator: str | None = None,
    json_output: bool = False,
    quiet: bool = False,
    verbose: bool = False,
    log_json: bool = False,
    start: Path | None = None,
) -> KindchainSettings:
    """Merge CLI flags, environment and config file into settings."""
    env = EnvironmentSettings()
    path = config_path or find_config(start, env=env)
    config = load_config(path)
    if separator is None:
        separator = env.separator
    if separator is not None:
        config = config.model_copy(update={"kinds": KindsConfig(separator=separator)})
    return KindchainSettings(
        config_path=path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose or env.verbose,
        log_json=log_json or env.log_json,
        config=config,
    )
