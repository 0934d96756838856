"""Human-readable rendering of ``ServiceResult`` with Rich.

Output is printed to a themed console inside ``Console.capture()`` and
returned as text; colour is only produced when stdout is a terminal.
Each op lists which ``data`` keys it shows and which table (if any)
follows them; unknown ops show every key.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from kindchain.services.result import ServiceResult

KIND_THEME = Theme(
    {
        "kind.ok": "bold green",
        "kind.error": "bold red",
        "kind.op": "bold cyan",
        "kind.key": "dim",
        "kind.id": "bold blue",
        "kind.path": "dim",
        "kind.value": "bold",
        "kind.match": "bold magenta",
    }
)

RENDER_WIDTH = 120

_KEY_STYLES = {
    "id": "kind.id",
    "matched": "kind.id",
    "path": "kind.path",
    "fallback": "kind.path",
    "value": "kind.value",
    "match": "kind.match",
    "matches": "kind.match",
}

_KIND_KEYS = ("id", "path", "fallback", "depth")
_OP_KEYS: dict[str, tuple[str, ...]] = {
    "inspect": _KIND_KEYS,
    "common": _KIND_KEYS,
    "resolve": ("id", "matched", "value"),
    "best_match": ("id", "match", "index", "distance"),
}


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* as a status line, its fields and an optional table."""
    console = Console(theme=KIND_THEME, width=RENDER_WIDTH, highlight=False)
    with console.capture() as capture:
        if result.ok:
            _render_ok(console, result, verbose)
        else:
            _render_error(console, result, verbose)
    return capture.get().rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """The one value of *result* worth piping into another command."""
    if not result.ok:
        reason = result.error.message if result.error else "failed"
        return f"ERROR: {result.op} — {reason}"
    data = result.data
    if result.op == "resolve":
        return str(data.get("value", ""))
    if result.op == "best_match":
        return str(data.get("index", ""))
    if result.op == "matches":
        return "true" if data.get("matches") else "false"
    return str(data["path"]) if "path" in data else f"OK: {result.op}"


def _field(key: str, value: Any) -> Text:
    if key in ("path", "fallback") and value is None:
        value = "—"
    return Text.assemble((f"  {key}: ", "kind.key"), (str(value), _KEY_STYLES.get(key, "")))


def _hierarchy(data: dict[str, Any], verbose: bool) -> Table:
    table = Table(pad_edge=False)
    table.add_column("Level", justify="right", style="dim")
    table.add_column("ID", style="kind.id", no_wrap=True)
    for level, kind_id in enumerate(data.get("hierarchy", [])):
        table.add_row(str(level), kind_id or "''")
    return table


def _trail(data: dict[str, Any], verbose: bool) -> Table | None:
    if not (verbose and data.get("trail")):
        return None
    table = Table(pad_edge=False)
    table.add_column("ID", style="kind.id", no_wrap=True)
    table.add_column("Value")
    for step in data["trail"]:
        table.add_row(str(step["id"]), str(step["value"]))
    return table


_OP_TABLES: dict[str, Callable[[dict[str, Any], bool], Table | None]] = {
    "inspect": _hierarchy,
    "common": _hierarchy,
    "resolve": _trail,
}


def _render_ok(console: Console, result: ServiceResult, verbose: bool) -> None:
    console.print(Text.assemble(("OK", "kind.ok"), (f"  {result.op}", "kind.op")))
    keys = _OP_KEYS.get(result.op, tuple(result.data))
    for key in keys:
        console.print(_field(key, result.data.get(key)))
    build = _OP_TABLES.get(result.op)
    table = build(result.data, verbose) if build else None
    if table is not None:
        console.print()
        console.print(table)


def _render_error(console: Console, result: ServiceResult, verbose: bool) -> None:
    error = result.error
    console.print(
        Text.assemble(
            ("ERROR", "kind.error"),
            (f"  {result.op}", "kind.op"),
            f" — {error.message if error else 'failed'}",
        )
    )
    if verbose and error is not None:
        for key, value in error.detail.items():
            console.print(_field(key, value))
