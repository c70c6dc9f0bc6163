"""MCP protocol — JSON-RPC models, stdio transport and the tool server."""

from assetmcp.protocols.mcp.models import (
    CallToolResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    MCPToolDef,
    TextContent,
    ToolCallParams,
)
from assetmcp.protocols.mcp.server import MCPServer
from assetmcp.protocols.mcp.transport import StdioTransport

__all__ = [
    "CallToolResult",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MCPServer",
    "MCPToolDef",
    "StdioTransport",
    "TextContent",
    "ToolCallParams",
]
