"""kindchain: cascading kinds with most-specific-first resolution."""

from kindchain.domain import Kind, clear_direct, get_cascading, set_direct

__version__ = "0.1.0"

__all__ = ["Kind", "__version__", "clear_direct", "get_cascading", "set_direct"]
