"""Route ``kindchain.*`` log records to stderr through structlog.

Services log through :func:`get_logger` and bind the separator and kind
path they are working on; plain stdlib records from the same package
pass through the same formatter.  Until :func:`configure_logging` runs,
the package logs like any quiet stdlib library.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

PACKAGE_LOGGER = "kindchain"
HANDLER_NAME = "kindchain-stderr"


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _stderr_handler(log_json: bool) -> logging.Handler:
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def get_logger(name: str) -> Any:
    """structlog logger writing to the stdlib logger *name*."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install (or replace) the stderr handler on the ``kindchain`` logger.

    ``verbose`` lowers the level to DEBUG; ``log_json`` emits one JSON
    object per line instead of the console renderer.
    """
    package = logging.getLogger(PACKAGE_LOGGER)
    for existing in [h for h in package.handlers if h.get_name() == HANDLER_NAME]:
        package.removeHandler(existing)
    package.addHandler(_stderr_handler(log_json))
    package.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package.propagate = False
