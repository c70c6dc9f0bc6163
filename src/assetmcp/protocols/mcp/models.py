"""MCP models — JSON-RPC 2.0 messages and tool definitions.

Implements the message format used by the Model Context Protocol for
capability negotiation (``initialize``), tool discovery (``tools/list``)
and execution (``tools/call``).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

JSONRPC_VERSION = "2.0"
MCP_PROTOCOL_VERSION = "2024-11-05"

PARSE_ERROR = -32700
INVALID_PARAMS = -32602
METHOD_NOT_FOUND = -32601

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message.

    ``id`` may be any JSON value or absent; :attr:`has_id` tells the two
    apart so the response can mirror the request exactly. ``params`` is kept
    raw and parsed by the handler of the method it belongs to.
    """

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    method: str = ""
    params: Any = None

    @property
    def has_id(self) -> bool:
        return "id" in self.model_fields_set


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Carries exactly one of ``result`` or ``error``. Build responses through
    :meth:`success` / :meth:`failure` so the ``id`` passthrough rules hold.
    """

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @classmethod
    def success(cls, request: JsonRpcRequest, result: dict[str, Any]) -> JsonRpcResponse:
        if request.has_id:
            return cls(id=request.id, result=result)
        return cls(result=result)

    @classmethod
    def failure(
        cls,
        request: JsonRpcRequest | None,
        code: int,
        message: str,
        detail: str = "",
    ) -> JsonRpcResponse:
        """Build an error response; *request* is ``None`` when the line could not be parsed."""
        error = JsonRpcError(code=code, message=f"{message}: {detail}" if detail else message)
        if request is None:
            return cls(id=None, error=error)
        if request.has_id:
            return cls(id=request.id, error=error)
        return cls(error=error)

    def to_wire(self) -> dict[str, Any]:
        """Return the wire representation, omitting ``id`` when it was never set."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if "id" in self.model_fields_set:
            data["id"] = self.id
        if self.error is not None:
            data["error"] = self.error.model_dump()
        else:
            data["result"] = self.result
        return data


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class MCPToolDef(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = {"populate_by_name": True, "frozen": True}

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ToolCallParams(BaseModel):
    """The ``params`` payload of a ``tools/call`` request."""

    name: str = ""
    arguments: dict[str, Any] | None = None


class TextContent(BaseModel):
    """Plain text content block."""

    type: Literal["text"] = "text"
    text: str


class CallToolResult(BaseModel):
    """The result of a ``tools/call``, returned inside a successful envelope."""

    model_config = {"populate_by_name": True}

    content: list[TextContent] = []
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def from_text(cls, text: str, *, is_error: bool = False) -> CallToolResult:
        """Create a result with a single text content block."""
        return cls(content=[TextContent(text=text)], is_error=is_error)

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {"content": [part.model_dump() for part in self.content]}
        if self.is_error:
            data["isError"] = True
        return data
