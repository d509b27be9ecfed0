"""Layered loading of service settings.

Sources are read lowest precedence first: settings file, then environment
variables, then explicit overrides. Because settings are applied in order
and the last write wins, later sources override earlier ones without any
merging step.
"""

from pathlib import Path
from typing import Any

from structlog.typing import FilteringBoundLogger

from rulesd.config._loader import parse_env_vars, read_toml_file, settings_from_mapping
from rulesd.config._models import ServiceConfiguration
from rulesd.config._parameters import Setting, build_configuration
from rulesd.enums import LogLevel


def load_settings(
    *,
    config_path: Path | None = None,
    include_env: bool = True,
    overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[Setting]:
    """Collect settings from every configured source.

    Args:
        config_path: Path to a TOML settings file. The file must exist.
        include_env: Whether to read RULESD_* environment variables.
        overrides: Raw values with the highest precedence (e.g. CLI flags).

    Returns:
        Settings in application order.

    Raises:
        FileNotFoundError: If config_path does not exist.
        ConfigLoadError: If the settings file cannot be parsed.
        ConfigValidationError: If any source holds an invalid value.
    """
    settings: list[Setting] = []
    if config_path is not None:
        settings.extend(
            settings_from_mapping(read_toml_file(config_path), source="file")
        )
    if include_env:
        settings.extend(settings_from_mapping(parse_env_vars(), source="env"))
    if overrides:
        settings.extend(settings_from_mapping(overrides, source="cli"))
    return settings


def load_configuration(
    *,
    config_path: Path | None = None,
    include_env: bool = True,
    overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
    default_log_level: LogLevel | None = None,
    logger: FilteringBoundLogger | None = None,
) -> ServiceConfiguration:
    """Load settings from every source and build the service configuration.

    Raises:
        MissingMandatoryFieldError: If no source specified a storage path.
    """
    settings = load_settings(
        config_path=config_path,
        include_env=include_env,
        overrides=overrides,
    )
    return build_configuration(
        *settings,
        default_log_level=default_log_level,
        logger=logger,
    )
