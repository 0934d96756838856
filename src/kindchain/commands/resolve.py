"""Command: resolve the most specific value for a kind."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kindchain.commands._examples import examples

if TYPE_CHECKING:
    from kindchain.commands._context import AppContext


def _parse_assignments(
    _ctx: click.Context, _param: click.Parameter, value: tuple[str, ...]
) -> dict[str, str]:
    """Turn ``("rect=blue", "general=gray")`` into a dict; later wins."""
    values: dict[str, str] = {}
    for item in value:
        key, sep, val = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected ID=VALUE, got {item!r}")
        values[key] = val
    return values


@click.command()
@examples(
    """\
  kindchain resolve upperLeft/rectCorner/rect/general -m rect=blue -m general=gray
  kindchain -v resolve upperLeft/rect/general
  kindchain -q resolve button/primary --no-config -m button=plain"""
)
@click.argument("path")
@click.option(
    "-m",
    "--map",
    "overrides",
    multiple=True,
    callback=_parse_assignments,
    metavar="ID=VALUE",
    help="Value for a kind (ID or path, repeatable). Overrides [values] from config.",
)
@click.option("--no-config", is_flag=True, help="Ignore the [values] table from config.")
@click.pass_obj
def resolve(app: AppContext, path: str, overrides: dict[str, str], no_config: bool) -> None:
    """Resolve the most specific value for PATH.

    Values come from the ``[values]`` table of kindchain.toml merged
    with any ``--map`` options; the first id along PATH's chain that has
    a value wins.
    """
    values = {} if no_config else dict(app.settings.values)
    values.update(overrides)
    app.emit(app.service.resolve(path, values))
