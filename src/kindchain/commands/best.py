"""Command: pick the most specific candidate for a kind."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kindchain.commands._examples import examples

if TYPE_CHECKING:
    from kindchain.commands._context import AppContext


@click.command()
@examples(
    """\
  kindchain best upperLeft/rectCorner/rect general rect
  kindchain -q best a/b/c c b"""
)
@click.argument("path")
@click.argument("candidates", nargs=-1, required=True)
@click.pass_obj
def best(app: AppContext, path: str, candidates: tuple[str, ...]) -> None:
    """Find the candidate reached from PATH with the fewest fallback steps.

    Ties at the same depth go to the candidate listed first.
    """
    app.emit(app.service.best_match(path, list(candidates)))
