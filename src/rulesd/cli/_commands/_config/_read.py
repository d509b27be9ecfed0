# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415, A002, TC003
"""Commands for checking and displaying the rules service configuration."""

from pathlib import Path
from typing import Annotated, Any

from cyclopts import Parameter

from rulesd.cli._context import CLIContext
from rulesd.config import (
    ConfigLoadError,
    ConfigValidationError,
    MissingMandatoryFieldError,
    ServiceConfiguration,
    load_configuration,
)
from rulesd.enums import LogLevel

from ._app import app
from ._exit_codes import EXIT_LOAD_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR
from ._formatters import OutputFormat, format_json, format_table, format_toml

# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------


def _collect_overrides(
    *,
    storage_path: str | None,
    admin_ip: list[str] | None,
    periodic_pruning: bool | None,
    log_level: LogLevel | None,
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Turn command-line flags into raw override values.

    Flags that were not given are left out so lower-precedence sources
    keep their values.
    """
    overrides: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]
    if storage_path is not None:
        overrides["storage_path"] = storage_path
    if admin_ip is not None:
        overrides["admin_ips"] = list(admin_ip)
    if periodic_pruning is not None:
        overrides["periodic_pruning"] = periodic_pruning
    if log_level is not None:
        overrides["log_level"] = log_level.value
    return overrides


def _build_or_exit(
    *,
    config: Path | None,
    no_env: bool,
    overrides: dict[str, Any],  # pyright: ignore[reportExplicitAny]
) -> ServiceConfiguration:
    """Build the configuration, exiting with a diagnostic on failure."""
    logger = CLIContext.get_current().logger

    try:
        return load_configuration(
            config_path=config,
            include_env=not no_env,
            overrides=overrides,
            logger=logger,
        )
    except FileNotFoundError:
        print(f"Error: Config file not found: {config}")
        raise SystemExit(EXIT_LOAD_ERROR) from None
    except ConfigLoadError as e:
        if logger is not None:
            logger.error("config_load_failed", path=str(e.path), line=e.line)
        print(f"Error: {e}")
        raise SystemExit(EXIT_LOAD_ERROR) from None
    except ConfigValidationError as e:
        if logger is not None:
            logger.error("config_value_invalid", key=e.key, source=e.source)
        source = f" (from {e.source})" if e.source else ""
        print(f"Error: {e}{source}. Expected: {e.expected}")
        raise SystemExit(EXIT_VALIDATION_ERROR) from None
    except MissingMandatoryFieldError as e:
        print(f"Error: {e} (missing: {e.field})")
        raise SystemExit(EXIT_VALIDATION_ERROR) from None


# Shared option annotations
ConfigOption = Annotated[
    Path | None,
    Parameter(name=["--config", "-c"], help="Path to a TOML settings file"),
]
StoragePathOption = Annotated[
    str | None,
    Parameter(name="--storage-path", help="Path to the rules database"),
]
AdminIpOption = Annotated[
    list[str] | None,
    Parameter(
        name="--admin-ip",
        help="IP address allowed administrative access (repeatable)",
    ),
]
PeriodicPruningOption = Annotated[
    bool | None,
    Parameter(
        name="--periodic-pruning",
        help="Enable periodic pruning of the rules database",
    ),
]
LogLevelOption = Annotated[
    LogLevel | None,
    Parameter(name="--log-level", help="Log level for the rules service"),
]
NoEnvOption = Annotated[
    bool,
    Parameter(name="--no-env", help="Ignore RULESD_* environment variables"),
]


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------


@app.command(name="check")
def _check(
    *,
    config: ConfigOption = None,
    storage_path: StoragePathOption = None,
    admin_ip: AdminIpOption = None,
    periodic_pruning: PeriodicPruningOption = None,
    log_level: LogLevelOption = None,
    no_env: NoEnvOption = False,
) -> None:
    """Check that the rules service configuration is complete

    Loads settings from the settings file, the environment and the given
    flags, in that order, and reports whether the service could start.

    Args:
        config: Path to a TOML settings file.
        storage_path: Path to the rules database.
        admin_ip: IP address allowed administrative access.
        periodic_pruning: Enable periodic pruning.
        log_level: Log level for the rules service.
        no_env: Ignore RULESD_* environment variables.
    """
    overrides = _collect_overrides(
        storage_path=storage_path,
        admin_ip=admin_ip,
        periodic_pruning=periodic_pruning,
        log_level=log_level,
    )
    configuration = _build_or_exit(config=config, no_env=no_env, overrides=overrides)

    print(f"Configuration OK (storage path: {configuration.storage_path})")
    raise SystemExit(EXIT_SUCCESS)


@app.command(name="show")
def _show(
    *,
    config: ConfigOption = None,
    storage_path: StoragePathOption = None,
    admin_ip: AdminIpOption = None,
    periodic_pruning: PeriodicPruningOption = None,
    log_level: LogLevelOption = None,
    no_env: NoEnvOption = False,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (toml, json, table)"),
    ] = OutputFormat.TOML,
) -> None:
    """Display the resolved rules service configuration

    Args:
        config: Path to a TOML settings file.
        storage_path: Path to the rules database.
        admin_ip: IP address allowed administrative access.
        periodic_pruning: Enable periodic pruning.
        log_level: Log level for the rules service.
        no_env: Ignore RULESD_* environment variables.
        format: Output format (toml, json, table).
    """
    overrides = _collect_overrides(
        storage_path=storage_path,
        admin_ip=admin_ip,
        periodic_pruning=periodic_pruning,
        log_level=log_level,
    )
    configuration = _build_or_exit(config=config, no_env=no_env, overrides=overrides)
    data = configuration.to_dict()

    match format:
        case OutputFormat.JSON:
            output = format_json(data)
        case OutputFormat.TABLE:
            output = format_table(data)
        case _:
            output = format_toml(data)

    print(output.rstrip())
    raise SystemExit(EXIT_SUCCESS)
