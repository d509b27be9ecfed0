"""Startup configuration for the rules service."""

from rulesd.config import (
    ServiceConfiguration,
    Setting,
    build_configuration,
    with_admin_ips,
    with_log_level,
    with_periodic_pruning,
    with_storage_path,
)
from rulesd.enums import LogLevel

__all__ = [
    "LogLevel",
    "ServiceConfiguration",
    "Setting",
    "build_configuration",
    "with_admin_ips",
    "with_log_level",
    "with_periodic_pruning",
    "with_storage_path",
]
