"""``--examples``: print sample invocations instead of running."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def examples(text: str) -> Callable[[F], F]:
    """Decorate a command or group with an eager ``--examples`` flag.

    The flag prints *text* under a heading naming the command and exits
    with status 0 before any argument is validated, so
    ``kindchain best --examples`` works without the required candidates.
    """

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"{ctx.command_path} examples:\n\n{text}")
            ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples and exit.",
    )
