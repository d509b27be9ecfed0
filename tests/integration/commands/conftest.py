from collections.abc import Callable, Generator

import pytest
from rich.console import Console

from rulesd.cli import CLIContext, create_app


@pytest.fixture(autouse=True)
def reset_cli_context() -> Generator[None]:
    yield
    CLIContext.reset()


@pytest.fixture
def rulesd_cli_with_exit_code(console: Console) -> Callable[..., int]:
    """Create CLI app for testing that returns the exit code."""

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        """Run CLI app and return exit code (0 if no SystemExit)."""

        try:
            app(args)
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run


@pytest.fixture
def rulesd_meta_cli_with_exit_code(console: Console) -> Callable[..., int]:
    """Like rulesd_cli_with_exit_code, but runs through the global options."""

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app.meta(args)
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run
