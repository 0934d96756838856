"""Command: check whether one kind is (or specialises) another."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kindchain.commands._examples import examples

if TYPE_CHECKING:
    from kindchain.commands._context import AppContext


@click.command("match")
@examples(
    """\
  kindchain match upperLeft/rect/general rect
  kindchain -q match rect upperLeft"""
)
@click.argument("path")
@click.argument("other")
@click.pass_obj
def match_cmd(app: AppContext, path: str, other: str) -> None:
    """Report whether PATH is OTHER or a more specific kind of it."""
    app.emit(app.service.matches(path, other))
