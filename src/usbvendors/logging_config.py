"""structlog wiring.

Library modules log through ``get_logger``, which binds structlog to a stdlib
``logging`` logger under the ``usbvendors`` namespace. Until a host attaches
handlers, stdlib drops debug/info events and sends anything at WARNING or
above to stderr, so importing the library never writes to stdout.
``setup_logging`` is for the command-line entry point only.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from usbvendors.config import LoggingSettings

ROOT_LOGGER = "usbvendors"


def get_logger(name: str = ROOT_LOGGER) -> Any:
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def setup_logging(settings: LoggingSettings) -> None:
    """Render usbvendors events to stderr, filtered at the configured level."""
    renderer: structlog.typing.Processor
    if settings.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger(ROOT_LOGGER)
    root.handlers[:] = [handler]
    root.setLevel(settings.level)
    root.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
