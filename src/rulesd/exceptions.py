"""rulesd exceptions."""

from pathlib import Path
from typing import Any


class RulesdError(Exception):
    """Base exception for rulesd errors."""


class ConfigError(RulesdError):
    """Base exception for configuration errors."""


class MissingMandatoryFieldError(ConfigError):
    """Raised when a mandatory configuration field is still unset after all
    settings have been applied.

    Attributes:
        field: Name of the configuration field that is missing.
    """

    def __init__(self, message: str, *, field: str) -> None:
        """Initialize with error message and the missing field name."""
        super().__init__(message)
        self.field: str = field


class ConfigLoadError(ConfigError):
    """Raised when a settings file cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when a raw settings value has the wrong type or form."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source
