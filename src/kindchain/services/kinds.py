"""KindService: parse, inspect, match and resolve kinds from text.

Every method takes kinds as path strings (``"upperLeft/rect/general"``)
using the service's separator and returns a :class:`ServiceResult`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from kindchain.config.logging import get_logger
from kindchain.domain.kind import DEFAULT_SEPARATOR, Kind
from kindchain.domain.lookup import resolve_all, set_direct
from kindchain.services.result import INVALID_INPUT, NO_MATCH, ServiceResult

logger = get_logger(__name__)


class KindService:
    """Text-in, ServiceResult-out facade over :class:`Kind`."""

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        if not separator:
            raise ValueError("separator must be a non-empty string")
        self._separator = separator

    @property
    def separator(self) -> str:
        return self._separator

    def parse(self, path: str) -> Kind[Any]:
        """Parse *path* with the configured separator."""
        return Kind.from_path(path, self._separator)

    def _log(self, path: str) -> Any:
        return logger.bind(separator=self._separator, path=path)

    def _by_id(self, values: Mapping[str, str]) -> dict[str, str]:
        """Key *values* by the top-level id of each key's kind path."""
        table: dict[str, str] = {}
        for key, value in values.items():
            set_direct(table, self.parse(key), value)
        return table

    def _describe(self, kind: Kind[Any]) -> dict[str, Any]:
        return {
            "id": kind.id,
            "path": kind.path(self._separator),
            "fallback": kind.fallback.path(self._separator) if kind.fallback is not None else None,
            "hierarchy": kind.hierarchy,
            "depth": kind.depth,
        }

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def inspect(self, path: str) -> ServiceResult:
        """Describe the chain parsed from *path*."""
        op = "inspect"
        kind = self.parse(path)
        self._log(path).debug("kind parsed", depth=kind.depth)
        return ServiceResult(ok=True, op=op, data=self._describe(kind))

    def resolve(self, path: str, values: Mapping[str, str]) -> ServiceResult:
        """Resolve the most specific value for *path* in *values*.

        Keys of *values* are kind paths; each value is stored under the
        top-level id of its key, later keys replacing earlier ones.
        ``data["trail"]`` lists every id along the chain that has a
        value, in cascade order; the first entry is the winner.
        """
        op = "resolve"
        kind = self.parse(path)
        table = self._by_id(values)
        trail = resolve_all(kind, table)
        log = self._log(path)
        if not trail:
            log.debug("no value", keys=len(table))
            return ServiceResult.failure(
                op,
                NO_MATCH,
                f"No value found for '{kind.path(self._separator)}'",
                hierarchy=kind.hierarchy,
            )
        matched_id, value = trail[0]
        log.debug("value resolved", matched=matched_id)
        warnings: list[str] = []
        if matched_id != kind.id:
            warnings.append(f"'{kind.id}' has no value; fell back to '{matched_id}'")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": kind.id,
                "matched": matched_id,
                "value": value,
                "trail": [{"id": i, "value": v} for i, v in trail],
            },
            warnings=warnings,
        )

    def matches(self, path: str, other: str) -> ServiceResult:
        """Report whether *path* is *other* or more specific than it."""
        op = "matches"
        kind = self.parse(path)
        other_kind = self.parse(other)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": kind.id,
                "other": other_kind.id,
                "matches": kind.matches(other_kind),
            },
        )

    def best_match(self, path: str, candidates: Sequence[str]) -> ServiceResult:
        """Find the candidate reached with the fewest fallback steps."""
        op = "best_match"
        if not candidates:
            return ServiceResult.failure(op, INVALID_INPUT, "At least one candidate is required")
        kind = self.parse(path)
        parsed = [self.parse(c) for c in candidates]
        index = kind.index_of_best_match(parsed)
        if index is None:
            return ServiceResult.failure(
                op,
                NO_MATCH,
                f"No candidate matches '{kind.path(self._separator)}'",
                candidates=list(candidates),
            )
        best = parsed[index]
        distance = kind.hierarchy.index(best.id)
        self._log(path).debug("best match", index=index, distance=distance)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": kind.id,
                "index": index,
                "match": best.path(self._separator),
                "distance": distance,
            },
        )

    def common(self, path: str, other: str) -> ServiceResult:
        """Find the most specific kind shared by *path*'s fallbacks and *other*."""
        op = "common"
        kind = self.parse(path)
        other_kind = self.parse(other)
        shared = kind.common_kind(other_kind)
        if shared is None:
            return ServiceResult.failure(
                op,
                NO_MATCH,
                f"'{kind.path(self._separator)}' and '{other_kind.path(self._separator)}' "
                "share no kind",
            )
        return ServiceResult(ok=True, op=op, data=self._describe(shared))
