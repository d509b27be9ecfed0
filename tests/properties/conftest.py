from pathlib import Path

import pytest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.property)


@pytest.fixture(autouse=True, scope="session")
def isolated_environment() -> None:
    """Property tests pass the log level explicitly and read no environment.

    Overrides the function-scoped fixture, which hypothesis rejects.
    """
