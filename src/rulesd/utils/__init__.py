"""Utilities for rulesd."""

from ._logging import create_service_logger, get_global_log_level, set_global_log_level

__all__ = ["create_service_logger", "get_global_log_level", "set_global_log_level"]
