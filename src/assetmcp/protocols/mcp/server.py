"""MCPServer — the stdio request loop and method router.

One line in, one line out: every input line produces exactly one response
line, including lines that are not valid JSON. Provider failures never
become JSON-RPC errors; they come back as ``isError`` tool results so the
calling agent sees them as ordinary tool output.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from assetmcp.protocols.errors import ToolError, ToolNotFoundError
from assetmcp.protocols.mcp.models import (
    INVALID_PARAMS,
    MCP_PROTOCOL_VERSION,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    CallToolResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ToolCallParams,
)
from assetmcp.utils.telemetry import (
    ATTR_PROVIDER,
    ATTR_TOOL_ERROR,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from assetmcp.protocols.mcp.transport import StdioTransport
    from assetmcp.protocols.provider import ToolProvider

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

ERROR_PREFIX = "Error"


def format_success(payload: dict[str, Any]) -> CallToolResult:
    """Render a tool's response object as one pretty-printed JSON text block."""
    text = json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
    return CallToolResult.from_text(text)


def format_failure(error: Exception) -> CallToolResult:
    return CallToolResult.from_text(f"{ERROR_PREFIX}: {error}", is_error=True)


class MCPServer:
    """Serves one :class:`ToolProvider` over a :class:`StdioTransport`.

    Usage::

        server = MCPServer(provider, StdioTransport(sys.stdin.buffer, sys.stdout.buffer))
        server.serve()   # returns when stdin is closed
    """

    def __init__(self, provider: ToolProvider, transport: StdioTransport) -> None:
        self._provider = provider
        self._transport = transport

    def serve(self) -> None:
        """Process lines until EOF. :class:`TransportError` propagates to the caller."""
        for line in self._transport.lines():
            response = self.handle_line(line)
            self._transport.send(response.to_wire())

    def handle_line(self, line: str) -> JsonRpcResponse:
        """Decode one raw line and route it."""
        if line.strip() == "null":
            # A null document decodes to an empty request: no method, null id.
            return self.handle_request(JsonRpcRequest(id=None))
        try:
            request = JsonRpcRequest.model_validate_json(line)
        except ValidationError as exc:
            logger.warning("Dropping unparseable request line: %s", _first_error(exc))
            return JsonRpcResponse.failure(None, PARSE_ERROR, "Parse error", _first_error(exc))
        return self.handle_request(request)

    def handle_request(self, request: JsonRpcRequest) -> JsonRpcResponse:
        logger.debug("Dispatching %s (id=%r)", request.method, request.id)
        if request.method == "initialize":
            return JsonRpcResponse.success(request, self._initialize_result())
        if request.method == "tools/list":
            return JsonRpcResponse.success(request, {"tools": self._provider.list_tools()})
        if request.method == "tools/call":
            return self._handle_tool_call(request)

        logger.warning("Unknown method: %s", request.method)
        return JsonRpcResponse.failure(
            request, METHOD_NOT_FOUND, "Method not found", f"Unknown method: {request.method}"
        )

    def _initialize_result(self) -> dict[str, Any]:
        return {
            "protocolVersion": MCP_PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": self._provider.name, "version": self._provider.version},
        }

    def _handle_tool_call(self, request: JsonRpcRequest) -> JsonRpcResponse:
        if request.params is None:
            return JsonRpcResponse.failure(
                request, INVALID_PARAMS, "Invalid params", "missing tools/call params"
            )
        try:
            params = ToolCallParams.model_validate(request.params)
        except ValidationError as exc:
            return JsonRpcResponse.failure(
                request, INVALID_PARAMS, "Invalid params", _first_error(exc)
            )

        try:
            tool = self._provider.get_tool(params.name)
        except ToolNotFoundError as exc:
            logger.warning("Unknown tool: %s", exc.name)
            return JsonRpcResponse.failure(request, METHOD_NOT_FOUND, "Method not found", str(exc))

        with _tracer.start_as_current_span("assetmcp.tool.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, tool.name)
            span.set_attribute(ATTR_PROVIDER, self._provider.name)
            try:
                result = format_success(tool.call(params.arguments))
            except ToolError as exc:
                logger.info("Tool %s failed: %s", tool.name, exc)
                result = format_failure(exc)
            span.set_attribute(ATTR_TOOL_ERROR, result.is_error)

        return JsonRpcResponse.success(request, result.to_wire())


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first['msg']}" if location else str(first["msg"])
