"""structlog configuration for graphwalk.

graphwalk runs inside someone else's process, so it only ever configures the
``graphwalk`` logger tree: one stderr handler with a structlog
``ProcessorFormatter``, propagation to the host's root logger switched off.
Root handlers, root level and the global structlog config are left alone.

Two output modes:
- Human (default): colored console output to stderr
- JSON (``log.format = "json"``): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "graphwalk"
HANDLER_NAME = "graphwalk.stderr"

SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger *name*.

    Wrapped explicitly rather than through ``structlog.get_logger`` so the
    host application's ``structlog.configure`` never changes our output.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route ``graphwalk.*`` records to stderr through structlog.

    Repeated calls replace the handler installed by the previous call.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    gw_logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in gw_logger.handlers if h.get_name() == HANDLER_NAME]:
        gw_logger.removeHandler(existing)
    gw_logger.addHandler(handler)
    gw_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    gw_logger.propagate = False
