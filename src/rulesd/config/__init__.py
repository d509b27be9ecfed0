"""rulesd configuration.

This module provides the public API for assembling the rules service
configuration from settings, and for loading settings from files,
environment variables and overrides.

Example:
    >>> from rulesd.config import build_configuration, with_storage_path
    >>> config = build_configuration(with_storage_path("/var/lib/rulesd"))
    >>> config.admin_ips
    ()
"""

from rulesd.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    MissingMandatoryFieldError,
)

from ._load import load_configuration, load_settings
from ._loader import parse_env_vars, read_toml_file, settings_from_mapping
from ._models import ServiceConfiguration, ServiceSettingsSchema
from ._parameters import (
    ConfigurationDraft,
    Setting,
    SettingFunc,
    build_configuration,
    with_admin_ips,
    with_log_level,
    with_periodic_pruning,
    with_storage_path,
)

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "ConfigurationDraft",
    "MissingMandatoryFieldError",
    "ServiceConfiguration",
    "ServiceSettingsSchema",
    "Setting",
    "SettingFunc",
    "build_configuration",
    "load_configuration",
    "load_settings",
    "parse_env_vars",
    "read_toml_file",
    "settings_from_mapping",
    "with_admin_ips",
    "with_log_level",
    "with_periodic_pruning",
    "with_storage_path",
]
