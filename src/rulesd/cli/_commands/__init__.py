"""rulesd CLI commands."""
# pyright: reportUnusedCallResult=false

from cyclopts import App

from ._config import app as config_app

__all__ = ["config_app", "register_commands"]


def register_commands(app: App) -> None:
    app.command(config_app)
