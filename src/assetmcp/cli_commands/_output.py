"""Shared CLI output formatters."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.table import Table

from assetmcp.protocols.mcp.models import MCPToolDef  # noqa: TC001

console = Console()


def print_tools_table(definitions: Iterable[MCPToolDef]) -> None:
    """Pretty-print tool descriptors as a table."""
    table = Table(title="Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Arguments")
    table.add_column("Description")

    for definition in definitions:
        properties = definition.input_schema.get("properties", {})
        required = set(definition.input_schema.get("required", []))
        arguments = ", ".join(
            f"{name}*" if name in required else name for name in properties
        ) or "-"
        table.add_row(definition.name, arguments, _truncate(definition.description))

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    first_line = text.splitlines()[0] if text else ""
    if len(first_line) <= max_len:
        return first_line
    return first_line[: max_len - 3] + "..."
