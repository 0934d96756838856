"""Cascading reads and direct writes on id-keyed mappings.

Reads cascade from the most specific id through every fallback.
Writes only ever touch the top-level id, so setting a value for
``upperLeft/rect`` never overwrites the shared ``rect`` entry.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import TypeVar

from kindchain.domain.kind import Kind

T = TypeVar("T")
V = TypeVar("V")


def get_cascading(
    mapping: Mapping[str, V],
    kind: Kind[T],
    default: V | None = None,
) -> V | None:
    """Return the most specific value for *kind*, or *default*.

    Examples:
        >>> styles = {"rect": "blue", "general": "gray"}
        >>> get_cascading(styles, Kind.from_path("upperLeft/rect/general"))
        'blue'
        >>> get_cascading(styles, Kind("other"), "none")
        'none'
    """
    for node in kind.walk():
        if node.id in mapping:
            return mapping[node.id]
    return default


def set_direct(mapping: MutableMapping[str, V], kind: Kind[T], value: V) -> None:
    """Store *value* under the top-level id of *kind* only."""
    mapping[kind.id] = value


def clear_direct(mapping: MutableMapping[str, V], kind: Kind[T]) -> None:
    """Remove the entry for the top-level id of *kind*, if present.

    Fallback entries are left untouched, so a later cascading read
    falls through to the next most specific value.
    """
    mapping.pop(kind.id, None)


def resolve_all(kind: Kind[T], mapping: Mapping[str, V]) -> list[tuple[str, V]]:
    """Every ``(id, value)`` present along the chain, in cascade order.

    The first entry (if any) is what :func:`get_cascading` returns.
    """
    return [(node.id, mapping[node.id]) for node in kind.walk() if node.id in mapping]
