# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
"""Config command app for checking rules service configuration."""

# Import command modules to register commands with the app
from . import _read as _read
from ._app import app
from ._exit_codes import EXIT_LOAD_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR
from ._formatters import OutputFormat, format_json, format_table, format_toml

__all__ = [
    "EXIT_LOAD_ERROR",
    "EXIT_SUCCESS",
    "EXIT_VALIDATION_ERROR",
    "OutputFormat",
    "app",
    "format_json",
    "format_table",
    "format_toml",
]
