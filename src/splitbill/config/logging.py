"""structlog setup for splitbill's service logs.

BillService logs each split, listing and settlement through stdlib
``logging.getLogger("splitbill.services.bill")``. This module routes
those records through a structlog ProcessorFormatter so they come out
on stderr either as console lines or as JSON objects carrying
``event``, ``level``, ``logger`` and ``timestamp``.

The ``splitbill`` logger is the only one whose level is raised by
``verbose``; every other logger stays at WARNING.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "splitbill"


def _shared_processors() -> list[structlog.types.Processor]:
    """Processors applied to both structlog and stdlib-originated events."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Install a single stderr handler rendering splitbill events.

    Safe to call repeatedly: the root handler list is replaced, not
    appended to.

    Args:
        verbose: Show the DEBUG events BillService emits per operation.
        log_json: One JSON object per event instead of console text.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
