"""
Logging setup for the CLI.

Library modules log through ``logging.getLogger(__name__)``; this only
attaches a structlog ``ProcessorFormatter`` to the root logger. DEBUG runs
get the colored console renderer, anything else gets JSON lines.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings

QUIET_LOGGERS = ("httpcore", "httpx")


def build_formatter(console: bool) -> structlog.stdlib.ProcessorFormatter:
    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if console:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        pre_chain.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def setup_logging(log_level: Optional[str] = None) -> None:
    """Route stdlib logging to stderr through structlog.

    Args:
        log_level: Override log level (default: from settings.log_level)
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)

    # stdout is reserved for command output
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(console=level == logging.DEBUG))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
