"""Command: find the kind shared by two chains."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kindchain.commands._examples import examples

if TYPE_CHECKING:
    from kindchain.commands._context import AppContext


@click.command()
@examples(
    """\
  kindchain common a/b/c x/b/z
  kindchain --json common upperLeft/rect/general lowerRight/rect/general"""
)
@click.argument("path")
@click.argument("other")
@click.pass_obj
def common(app: AppContext, path: str, other: str) -> None:
    """Find the most specific fallback of PATH that OTHER also has.

    The result continues through PATH's own remaining fallbacks.
    """
    app.emit(app.service.common(path, other))
