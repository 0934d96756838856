"""Command: show the fallback chain of a kind path."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kindchain.commands._examples import examples

if TYPE_CHECKING:
    from kindchain.commands._context import AppContext


@click.command("inspect")
@examples(
    """\
  kindchain inspect upperLeft/rectCorner/rect/general
  kindchain --json inspect upperLeft/rect
  kindchain -s . inspect button.primary.default"""
)
@click.argument("path")
@click.pass_obj
def inspect_cmd(app: AppContext, path: str) -> None:
    """Show the id, fallbacks and hierarchy of PATH."""
    app.emit(app.service.inspect(path))
