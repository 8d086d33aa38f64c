"""structlog configuration for addrctl.

Modules keep logging through ``logging.getLogger(__name__)``; structlog
only formats what reaches the root handler. Output goes to stderr so
stdout stays reserved for command feedback:

- console renderer by default, colored when the stream is a TTY
- one JSON object per line with ``--log-json``, tracebacks inlined as
  an ``exception`` string

Only the ``addrctl`` logger is lowered to DEBUG by ``--verbose``; every
other logger stays at WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

APP_LOGGER = "addrctl"


def _pre_chain(log_json: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if log_json:
        # The console renderer formats exc_info itself.
        processors.append(structlog.processors.format_exc_info)
    processors.append(structlog.processors.UnicodeDecoder())
    return processors


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    isatty = getattr(stream, "isatty", None)
    return structlog.dev.ConsoleRenderer(colors=bool(isatty and isatty()))


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route stdlib and structlog records through one structlog formatter.

    Safe to call repeatedly: the root handler is replaced, not stacked.

    Args:
        verbose: Show addrctl DEBUG/INFO records (each user command is
            logged at INFO).
        log_json: Render JSON lines instead of console text.
        stream: Destination; defaults to the current ``sys.stderr``.
    """
    target = stream if stream is not None else sys.stderr
    pre_chain = _pre_chain(log_json)

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(target)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, target),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
