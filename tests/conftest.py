"""Shared test fixtures for rulesd tests."""

import os
from collections.abc import Generator

import pytest
from rich.console import Console

from rulesd.utils import set_global_log_level


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Remove RULESD_* variables and reset the global log level."""
    for key in list(os.environ):
        if key.startswith("RULESD_"):
            monkeypatch.delenv(key)
    set_global_log_level(None)
    yield
    set_global_log_level(None)


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
