"""``kindchain`` entry point: global flags, settings, subcommands."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from kindchain import __version__
from kindchain.commands import register_commands
from kindchain.commands._context import AppContext
from kindchain.commands._examples import examples
from kindchain.config.settings import load_settings


@click.group("kindchain", invoke_without_command=True)
@examples(
    """\
  kindchain inspect upperLeft/rectCorner/rect/general
  kindchain resolve upperLeft/rect/general -m rect=blue
  kindchain match upperLeft/rect/general rect
  kindchain best a/b/c c b
  kindchain common a/b/c x/b/z"""
)
@click.version_option(version=__version__, prog_name="kindchain")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the essential value.")
@click.option("-v", "--verbose", is_flag=True, help="Show cascade trails and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Use this kindchain.toml instead of searching for one.",
)
@click.option("-s", "--separator", help="Path separator (one character; default '/').")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: Path | None,
    separator: str | None,
) -> None:
    """Inspect kind chains and resolve values most-specific-first."""
    try:
        settings = load_settings(
            config_path,
            separator=separator,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        raise click.UsageError(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
