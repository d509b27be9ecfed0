# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Raw settings sources: TOML files, environment variables and overrides."""

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from rulesd.config._models import ServiceSettingsSchema
from rulesd.config._parameters import (
    Setting,
    with_admin_ips,
    with_log_level,
    with_periodic_pruning,
    with_storage_path,
)
from rulesd.enums import LogLevel
from rulesd.exceptions import ConfigLoadError, ConfigValidationError

ENV_PREFIX = "RULESD_"

# Keys read from the environment, in the order settings are produced
_ENV_KEYS = ("log_level", "storage_path", "admin_ips", "periodic_pruning")

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

_EXPECTED = {
    "log_level": " | ".join(LogLevel),
    "storage_path": "string",
    "admin_ips": "list of strings",
    "periodic_pruning": "boolean",
}


def read_toml_file(path: Path) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Read and parse a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Parsed TOML content as dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file cannot be parsed.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse TOML file: {e}"
        raise ConfigLoadError(
            msg,
            path=path,
            # lineno and colno only exist on Python 3.14+
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e


def _parse_env_value(key: str, value: str) -> Any:  # pyright: ignore[reportExplicitAny]
    """Parse an environment variable value for the given settings key.

    Values that cannot be interpreted are returned unchanged so that
    validation reports them.
    """
    match key:
        case "admin_ips":
            return [ip.strip() for ip in value.split(",") if ip.strip()]
        case "periodic_pruning":
            lowered = value.strip().lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            return value
        case "log_level":
            return value.strip().lower()
        case _:
            return value


def parse_env_vars(prefix: str = ENV_PREFIX) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Parse environment variables into a raw settings dictionary.

    Args:
        prefix: Environment variable prefix (default: "RULESD_").

    Returns:
        Dictionary of raw settings values keyed by settings name.

    Environment variable naming:
        - Add prefix (RULESD_)
        - Convert to uppercase
        - Example: storage_path -> RULESD_STORAGE_PATH
        - RULESD_ADMIN_IPS is a comma-separated list
    """
    result: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]
    for key in _ENV_KEYS:
        value = os.environ.get(f"{prefix}{key.upper()}")
        if value is None:
            continue
        result[key] = _parse_env_value(key, value)
    return result


def settings_from_mapping(
    values: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    *,
    source: str | None = None,
) -> list[Setting]:
    """Validate raw settings values and turn them into settings.

    Keys may sit at the top level or inside a ``service`` table; the table
    wins when both are present. Unknown keys are ignored.

    Args:
        values: Raw settings values.
        source: Name of the source the values came from, for error reporting.

    Returns:
        Settings for the keys present in values, in a fixed field order.

    Raises:
        ConfigValidationError: If a value has the wrong type, or ``service``
            is not a table.
    """
    raw = dict(values)
    if "service" in raw:
        section = raw.pop("service")
        if not isinstance(section, dict):
            msg = "Invalid value for 'service': expected a table"
            raise ConfigValidationError(
                msg,
                key="service",
                value=section,
                expected="table",
                source=source,
            )
        raw.update(section)

    try:
        schema = ServiceSettingsSchema.model_validate(raw)
    except ValidationError as e:
        error = e.errors()[0]
        key = str(error["loc"][0]) if error["loc"] else ""
        msg = f"Invalid value for '{key}': {error['msg']}"
        raise ConfigValidationError(
            msg,
            key=key,
            value=error.get("input"),
            expected=_EXPECTED.get(key, "valid value"),
            source=source,
        ) from e

    settings: list[Setting] = []
    if schema.log_level is not None:
        settings.append(with_log_level(schema.log_level))
    if schema.storage_path is not None:
        settings.append(with_storage_path(schema.storage_path))
    if schema.admin_ips is not None:
        settings.append(with_admin_ips(schema.admin_ips))
    if schema.periodic_pruning is not None:
        settings.append(with_periodic_pruning(schema.periodic_pruning))
    return settings
