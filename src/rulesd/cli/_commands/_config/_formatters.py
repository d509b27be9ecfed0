"""Output formatters for config commands."""

from enum import StrEnum
from typing import Any

# Type alias for configuration data - uses Any to match library signatures
ConfigData = dict[str, Any]  # pyright: ignore[reportExplicitAny]


class OutputFormat(StrEnum):
    """Supported output formats for config show."""

    TOML = "toml"
    JSON = "json"
    TABLE = "table"


def format_toml(data: ConfigData) -> str:
    """Format data as TOML under a ``[service]`` table.

    The output can be fed back to ``--config``.
    """
    import tomli_w

    return tomli_w.dumps({"service": data})


def format_json(data: ConfigData, *, indent: bool = True) -> str:
    """Format data as JSON.

    Args:
        data: Dictionary to format as JSON.
        indent: Whether to pretty-print with indentation.

    Returns:
        JSON-formatted string representation.
    """
    import orjson

    options = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=options).decode("utf-8")


def _format_cell(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list | tuple):
        return ", ".join(str(item) for item in value) or "-"
    return str(value)


def format_table(data: ConfigData) -> str:
    """Format data as a two-column Markdown table of setting and value."""
    from pytablewriter import MarkdownTableWriter

    writer = MarkdownTableWriter(
        headers=["Setting", "Value"],
        value_matrix=[[key, _format_cell(value)] for key, value in data.items()],
        margin=1,
    )
    return writer.dumps()
