"""Logging utilities for rulesd.

This module owns the process-wide default log level and provides a
standalone structlog logger factory. Loggers created here are
self-contained and do not modify global structlog configuration.
"""

import logging
import sys
from os import getenv
from pathlib import Path
from typing import cast

import structlog
from structlog.typing import EventDict, FilteringBoundLogger, Processor

from rulesd.enums import LogFormat, LogLevel

_global_log_level: LogLevel | None = None


def _log_level_from_env() -> LogLevel:
    """Get the log level from environment variables.

    Checks RULESD_DEBUG first (sets DEBUG if present), then RULESD_LOG_LEVEL.
    Defaults to INFO if neither is set or the value is unknown.

    Returns:
        The log level read from the environment.
    """
    if getenv("RULESD_DEBUG", None):
        return LogLevel.DEBUG

    try:
        return LogLevel(getenv("RULESD_LOG_LEVEL", "info").lower())
    except ValueError:
        return LogLevel.INFO


def get_global_log_level() -> LogLevel:
    """Return the process-wide default log level.

    The first call derives the level from the environment; later calls return
    whatever was last set with set_global_log_level().
    """
    global _global_log_level  # noqa: PLW0603
    if _global_log_level is None:
        _global_log_level = _log_level_from_env()
    return _global_log_level


def set_global_log_level(level: LogLevel | None) -> None:
    """Replace the process-wide default log level.

    Passing None discards the current value so the next read goes back to
    the environment.
    """
    global _global_log_level  # noqa: PLW0603
    _global_log_level = level


def _drop_event(_logger: object, _method_name: str, _event_dict: EventDict) -> EventDict:
    raise structlog.DropEvent


def create_service_logger(
    *,
    level: LogLevel | None = None,
    log_format: LogFormat = LogFormat.JSON,
    log_file: str = "",
) -> FilteringBoundLogger:
    """Create a standalone structlog logger for the rules service.

    Args:
        level: Log level threshold (uses the global default if not specified).
        log_format: Output format, either JSON or text.
        log_file: Path to a log file opened in append mode. Logs go to stderr
            when empty.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    effective_level = level if level is not None else get_global_log_level()

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger_factory = structlog.WriteLoggerFactory(file=log_path.open("a"))
    else:
        logger_factory = structlog.WriteLoggerFactory(file=sys.stderr)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if effective_level is LogLevel.DISABLED:
        processors.insert(0, _drop_event)

    if log_format == LogFormat.JSON:
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    # Filtering loggers only exist for the stdlib levels
    wrapper_class = structlog.make_filtering_bound_logger(
        min(effective_level.to_logging_level(), logging.CRITICAL)
    )

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            logger_factory(),
            processors=processors,
            wrapper_class=wrapper_class,
            context_class=dict,
        ),
    )
