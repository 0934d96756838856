"""Subcommand modules for kindchain.

Provides register_commands() which uses deferred imports to keep
``kindchain --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from kindchain.commands.best import best
    from kindchain.commands.common import common
    from kindchain.commands.inspect import inspect_cmd
    from kindchain.commands.match import match_cmd
    from kindchain.commands.resolve import resolve

    cli.add_command(inspect_cmd)
    cli.add_command(resolve)
    cli.add_command(match_cmd)
    cli.add_command(best)
    cli.add_command(common)
