"""structlog setup for diskkit.

Log events are snake_case names with key/value context, rendered either for
a terminal or as one JSON object per line. Everything goes to stderr: the
CLI reserves stdout for sanitized names.

The sanitizer core never logs; only the filesystem facade, the table loader
and the CLI do.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from diskkit.config.settings import LoggingSettings

__all__ = ["configure_logging", "get_logger"]


def _renderer(json_output: bool) -> structlog.types.Processor:
    if json_output:
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    settings: LoggingSettings | None = None, *, verbose: bool = False
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        settings: Logging settings; without them, console output at
            WARNING level is used.
        verbose: Force DEBUG level regardless of settings.

    """
    verbose = verbose or (settings is not None and settings.verbose)
    json_output = settings is not None and settings.json_output

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            _renderer(json_output),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return the structlog logger for a module, usually ``__name__``."""
    return structlog.get_logger(name)
