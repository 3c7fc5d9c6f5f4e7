"""structlog configuration shared by every entry point that drives a run."""

import logging
import sys
from typing import Literal

import structlog

type LogFormat = Literal["console", "json"]
type LogLevel = Literal["debug", "info", "warning", "error"]


def configure_structlog(
    log_format: LogFormat = "console", log_level: LogLevel = "info"
) -> None:
    """Route evalrun's structlog events to stderr in the requested format.

    Row-level events (``evaluation.row.started``, ``evaluation.progress``) are
    logged at debug and only appear with ``log_level="debug"``.

    Raises:
        ValueError: if log_format or log_level is not one of the accepted values.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty()
        )
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        raise ValueError(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'."
        )

    level = logging.getLevelNamesMapping().get(log_level.upper())
    if level is None:
        raise ValueError(
            f"Invalid log level: {log_level!r}. "
            "Must be 'debug', 'info', 'warning' or 'error'."
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
