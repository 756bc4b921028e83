# annotext/logs.py
"""Logging configuration for annotext."""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Union

import structlog

# Silent until an application configures logging.
logging.getLogger("annotext").addHandler(logging.NullHandler())


def configure_logging(level: Union[int, str] = logging.INFO, json: bool = False) -> None:
    """
    Configure structlog on top of standard logging.

    The library never calls this itself; applications embedding annotext opt in.

    Args:
        level: Root log level.
        json: Render JSON lines instead of the human-readable console format.

    """
    processors: List[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=renderer))

    logging.basicConfig(handlers=[handler], level=level, force=True)

    structlog.configure(
        processors=[
            *processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Union[str, None] = None) -> Any:
    """
    Get a logger instance.

    Events go through the standard library logger of the same name, so
    nothing is emitted until configure_logging() (or the host application)
    installs handlers.

    Args:
        name: Logger name

    Returns:
        A lazily bound structlog logger wrapping a stdlib logger

    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
