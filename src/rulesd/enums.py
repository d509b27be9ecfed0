"""Enumeration types for rulesd."""

import logging
from enum import StrEnum


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (disabled).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
    DISABLED = "disabled"

    def to_logging_level(self) -> int:
        """Convert to the matching stdlib logging level integer.

        DISABLED maps above CRITICAL so that nothing passes the filter.
        """
        if self is LogLevel.DISABLED:
            return logging.CRITICAL + 10
        return logging.getLevelNamesMapping()[self.value.upper()]


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"
