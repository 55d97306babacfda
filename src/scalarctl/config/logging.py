"""structlog configuration for scalarctl.

Two output modes, both written to stderr so stdout stays clean for
results:
- Human (default): console renderer, colored only on a TTY
- JSON (--log-json): one JSON object per line

Domain modules log through stdlib ``logging``; services bind context
with :func:`get_logger`. Both end up in the same handler.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

LOGGER_NAMESPACE = "scalarctl"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog and install a single stderr handler.

    Safe to call repeatedly; the root handler is replaced, not stacked.

    Args:
        verbose: DEBUG for ``scalarctl.*`` loggers; WARNING otherwise.
        log_json: Use the JSON renderer.
        stream: Override the output stream (defaults to ``sys.stderr``).
    """
    out = stream or sys.stderr

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, out),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAMESPACE).setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("pluggy").setLevel(logging.WARNING)


def get_logger(name: str, **context: Any) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger with *context* bound to every event."""
    return structlog.get_logger(name).bind(**context)
