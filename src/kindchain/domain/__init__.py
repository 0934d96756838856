"""Domain layer: the Kind chain and cascading lookups.

This layer depends only on the stdlib.
It must never import from services, commands, output, or config.
"""

from kindchain.domain.kind import DEFAULT_SEPARATOR, Kind
from kindchain.domain.lookup import clear_direct, get_cascading, resolve_all, set_direct

__all__ = [
    "DEFAULT_SEPARATOR",
    "Kind",
    "clear_direct",
    "get_cascading",
    "resolve_all",
    "set_direct",
]
