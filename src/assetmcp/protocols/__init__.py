"""Protocol layer — tool abstraction, argument handling and the MCP server."""

from assetmcp.protocols.arguments import ToolArguments
from assetmcp.protocols.errors import (
    ProtocolError,
    ToolArgumentError,
    ToolError,
    ToolExecutionError,
    ToolNotFoundError,
    TransportError,
)
from assetmcp.protocols.provider import Tool, ToolProvider

__all__ = [
    "ProtocolError",
    "Tool",
    "ToolArgumentError",
    "ToolArguments",
    "ToolError",
    "ToolExecutionError",
    "ToolNotFoundError",
    "ToolProvider",
    "TransportError",
]
