"""Tool and ToolProvider — the small interface that parameterizes the MCP server.

Every upstream adapter (FOFA, ZoomEye) builds a :class:`ToolProvider` so a
single :class:`~assetmcp.protocols.mcp.server.MCPServer` loop can serve it
without knowing anything about the provider's API.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from assetmcp.protocols.arguments import ToolArguments
from assetmcp.protocols.errors import ToolNotFoundError
from assetmcp.protocols.mcp.models import MCPToolDef

P = TypeVar("P")


@dataclass(frozen=True)
class Tool(Generic[P]):
    """One callable tool: its static descriptor, argument normalizer and invoker.

    ``normalize`` turns raw arguments into validated parameters (raising
    :class:`~assetmcp.protocols.errors.ToolArgumentError` before any network
    call), ``invoke`` performs the upstream call and returns the JSON-ready
    response object.
    """

    definition: MCPToolDef
    normalize: Callable[[ToolArguments], P]
    invoke: Callable[[P], dict[str, Any]]

    @property
    def name(self) -> str:
        return self.definition.name

    def call(self, arguments: Mapping[str, Any] | None) -> dict[str, Any]:
        params = self.normalize(ToolArguments(arguments))
        return self.invoke(params)


class ToolProvider:
    """Server identity plus an ordered, immutable tool catalog.

    Usage::

        provider = ToolProvider("fofa-mcp", "1.0.0", [search_tool, stats_tool])
        provider.list_tools()              # static tools/list payload
        provider.get_tool("fofa_search")   # raises ToolNotFoundError if absent
    """

    def __init__(self, name: str, version: str, tools: Iterable[Tool[Any]]) -> None:
        self.name = name
        self.version = version
        self._tools: dict[str, Tool[Any]] = {}
        for tool in tools:
            self._tools[tool.name] = tool

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    def list_tools(self) -> list[dict[str, Any]]:
        """Return tool descriptors in catalog order, shaped for ``tools/list``."""
        return [tool.definition.to_wire() for tool in self._tools.values()]

    def get_tool(self, name: str) -> Tool[Any]:
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)
        return tool
