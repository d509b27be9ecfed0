"""Utilities used by the rulesd CLI."""

from ._app import app, create_app, main
from ._context import CLIContext

__all__ = ["CLIContext", "app", "create_app", "main"]
