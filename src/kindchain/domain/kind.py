"""Cascading kinds: an id with an optional chain of fallback ids.

A ``Kind[T]`` is only associated with the taxonomy tag ``T``, which
exists for type checkers and carries no runtime data.  A drag handle
might be ``upperLeft``, which is also a ``rectCorner`` handle, which is
also a ``rect`` handle, and finally just a ``general`` one::

    >>> handle = Kind.from_path("upperLeft/rectCorner/rect/general")
    >>> handle.value_in_ids({"rect": "blue", "general": "gray"})
    'blue'

Configuration can then be attached at any level of specificity and the
most specific available value wins.

INVARIANT: equality and hashing use the top-level ``id`` only.  The
fallback chain is resolution metadata, not identity.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
V = TypeVar("V")

DEFAULT_SEPARATOR = "/"


def _check_separator(separator: str) -> None:
    if not separator:
        raise ValueError("separator must be a non-empty string")


@dataclass(frozen=True, eq=False, repr=False)
class Kind(Generic[T]):
    """A kind id plus its (optional) fallback kind.

    Chains are finite and acyclic: they are only built from explicit
    fallbacks, sequences, or path strings.
    """

    id: str
    fallback: Kind[T] | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, value: str) -> Kind[T]:
        """Terminal kind from a bare string."""
        return cls(value)

    @classmethod
    def from_hierarchy(cls, ids: Iterable[str]) -> Kind[T] | None:
        """Build a chain from ids ordered most specific first.

        Returns ``None`` for an empty sequence.

        Examples:
            >>> Kind.from_hierarchy(["a", "b"]).path()
            'a/b'
            >>> Kind.from_hierarchy([]) is None
            True
        """
        kind: Kind[T] | None = None
        for kind_id in reversed(list(ids)):
            kind = cls(kind_id, kind)
        return kind

    @classmethod
    def from_path(cls, path: str, separator: str = DEFAULT_SEPARATOR) -> Kind[T]:
        """Parse ``"upperLeft/rectCorner/rect"`` style paths.

        Each level splits on the first separator, so empty segments are
        kept as empty ids and ``n`` separators give ``n + 1`` levels.

        Examples:
            >>> Kind.from_path("a/b/c").hierarchy
            ['a', 'b', 'c']
            >>> Kind.from_path("/a/").hierarchy
            ['', 'a', '']
            >>> Kind.from_path("").hierarchy
            ['']
        """
        _check_separator(separator)
        kind = cls.from_hierarchy(path.split(separator))
        assert kind is not None  # str.split always yields at least one part
        return kind

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def walk(self) -> Iterator[Kind[T]]:
        """Yield this kind and then each fallback, most specific first."""
        node: Kind[T] | None = self
        while node is not None:
            yield node
            node = node.fallback

    @property
    def hierarchy(self) -> list[str]:
        """All ids in the chain, most specific first."""
        return [node.id for node in self.walk()]

    @property
    def depth(self) -> int:
        """Number of levels in the chain (a terminal kind has depth 1)."""
        return sum(1 for _ in self.walk())

    def path(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """Join the hierarchy with *separator*; inverse of :meth:`from_path`."""
        _check_separator(separator)
        return separator.join(self.hierarchy)

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def matches(self, other: str | Kind[T]) -> bool:
        """True if *other* is this kind or one of its fallbacks.

        In other words, ``self`` is equal to or more specific than
        *other*.  A plain string is compared against each id.
        """
        target = other.id if isinstance(other, Kind) else other
        return any(node.id == target for node in self.walk())

    def index_of_best_match(self, candidates: Sequence[str | Kind[T]]) -> int | None:
        """Index of the candidate reached with the fewest fallback steps.

        The top id is searched first, then each fallback in turn.  Within
        one level the first matching candidate wins.  Kind candidates are
        compared by their top-level id.

        Examples:
            >>> Kind.from_path("a/b/c").index_of_best_match(["c", "b"])
            1
            >>> Kind.from_path("a/b").index_of_best_match(["x"]) is None
            True
        """
        ids = [c.id if isinstance(c, Kind) else c for c in candidates]
        if not ids:
            return None
        for node in self.walk():
            for index, candidate_id in enumerate(ids):
                if candidate_id == node.id:
                    return index
        return None

    def best_match(self, candidates: Sequence[Kind[T]]) -> Kind[T] | None:
        """The candidate at :meth:`index_of_best_match`, or ``None``."""
        index = self.index_of_best_match(candidates)
        if index is None:
            return None
        return candidates[index]

    def common_kind(self, other: Kind[T]) -> Kind[T] | None:
        """Most specific kind shared by this chain's fallbacks and *other*.

        The result is always rebuilt from this chain: it starts at the
        matched id and continues through the rest of ``self``'s
        fallbacks.  Identical top ids short-circuit to ``self``.

        Examples:
            >>> a = Kind.from_path("a/b/c")
            >>> a.common_kind(Kind.from_path("x/b/z")).path()
            'b/c'
            >>> Kind.from_path("a/b").common_kind(Kind.from_path("x/y")) is None
            True
        """
        if self.id == other.id:
            return self
        if self.fallback is None:
            return None
        ids = self.fallback.hierarchy
        index = other.index_of_best_match(ids)
        if index is None:
            return None
        return type(self).from_hierarchy(ids[index:])

    # ------------------------------------------------------------------
    # Value resolution
    # ------------------------------------------------------------------

    def value_in(self, mapping: Mapping[Kind[T], V]) -> V | None:
        """Most specific value in a kind-keyed mapping, or ``None``."""
        for node in self.walk():
            if node in mapping:
                return mapping[node]
        return None

    def value_in_ids(self, mapping: Mapping[str, V]) -> V | None:
        """Most specific value in an id-keyed mapping, or ``None``."""
        for node in self.walk():
            if node.id in mapping:
                return mapping[node.id]
        return None

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Kind):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.path()

    def __repr__(self) -> str:
        return f"Kind({self.path()})"
