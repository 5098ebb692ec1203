# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.stdlib import ProcessorFormatter


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger that is backed by the standard library logger `name`.

    Events are subject to the level and handlers of the standard library logging
    tree, so nothing is printed unless the application configures logging (for
    example with :func:`setup_logging`). Callers on hot paths check
    ``logging.getLogger(name).isEnabledFor(...)`` first, because the processor chain
    runs before the standard library level check.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def setup_logging(
    log_level: int = logging.INFO,
    *,
    stream: TextIO | None = None,
    colors: bool | None = None,
):
    """
    Configure structlog and standard library logging for pydiverse.collections.

    :param log_level:
        Level of the ``pydiverse`` logger (a level constant of the ``logging``
        module). Bulk operations log at ``DEBUG``.

    :param stream:
        Where rendered events are written to. Defaults to ``sys.stderr``.

    :param colors:
        Whether the console renderer uses ANSI colors. By default colors are used
        if the stream is a terminal.
    """
    if stream is None:
        stream = sys.stderr
    if colors is None:
        colors = stream.isatty()

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S.%f", utc=False),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        # loggers are created at import time, so reconfiguration must reach them
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        ProcessorFormatter(
            processors=[
                ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(colors=colors),
            ],
            foreign_pre_chain=shared_processors,
        )
    )

    pkg_logger = logging.getLogger("pydiverse")
    pkg_logger.handlers = [handler]
    pkg_logger.setLevel(log_level)
    pkg_logger.propagate = False
