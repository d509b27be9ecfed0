"""The command-line interface for rulesd."""

from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from rulesd.enums import LogFormat
from rulesd.utils import create_service_logger

from ._commands import register_commands
from ._context import CLIContext

_HELP = "Startup configuration for the rules service."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="rulesd",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        log_format: Annotated[
            LogFormat, Parameter(name="--log-format", help="CLI log output format")
        ] = LogFormat.TEXT,
        log_file: Annotated[
            str, Parameter(name="--log-file", help="Write CLI logs to this file")
        ] = "",
    ) -> None:
        """Launch the rulesd CLI with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            log_format: Output format of CLI logs.
            log_file: File for CLI logs; logs go to stderr when empty.
        """
        ctx = CLIContext(
            logger=create_service_logger(log_format=log_format, log_file=log_file),
        )
        CLIContext.set_current(ctx)

        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `rulesd` CLI."""
    app.meta()


if __name__ == "__main__":
    main()
