"""Tests for MCP JSON-RPC models."""

import json

import pytest

from assetmcp.protocols.mcp.models import (
    CallToolResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    MCPToolDef,
    ToolCallParams,
)


class TestJsonRpcRequest:
    def test_defaults(self) -> None:
        req = JsonRpcRequest.model_validate_json('{"method": "tools/list"}')
        assert req.jsonrpc == "2.0"
        assert req.params is None
        assert req.has_id is False

    def test_null_id_is_present(self) -> None:
        req = JsonRpcRequest.model_validate_json('{"id": null, "method": "x"}')
        assert req.has_id is True
        assert req.id is None

    @pytest.mark.parametrize("raw_id", [7, "abc", 1.5, {"k": 1}])
    def test_id_kept_verbatim(self, raw_id: object) -> None:
        req = JsonRpcRequest.model_validate_json(json.dumps({"id": raw_id, "method": "x"}))
        assert req.id == raw_id


class TestJsonRpcResponse:
    def test_success_echoes_id(self) -> None:
        req = JsonRpcRequest(id=42, method="initialize")
        wire = JsonRpcResponse.success(req, {"ok": True}).to_wire()
        assert wire == {"jsonrpc": "2.0", "id": 42, "result": {"ok": True}}

    def test_success_without_id_omits_key(self) -> None:
        req = JsonRpcRequest(method="initialize")
        wire = JsonRpcResponse.success(req, {}).to_wire()
        assert "id" not in wire
        assert "error" not in wire

    def test_failure_concatenates_detail(self) -> None:
        req = JsonRpcRequest(id="a", method="x")
        wire = JsonRpcResponse.failure(req, -32601, "Method not found", "Unknown method: x").to_wire()
        assert wire["error"] == {"code": -32601, "message": "Method not found: Unknown method: x"}
        assert "result" not in wire

    def test_failure_without_request_has_null_id(self) -> None:
        wire = JsonRpcResponse.failure(None, -32700, "Parse error").to_wire()
        assert wire == {"jsonrpc": "2.0", "id": None, "error": {"code": -32700, "message": "Parse error"}}

    @pytest.mark.parametrize(
        "request_json",
        ['{"id": 1, "method": "m"}', '{"id": "s", "method": "m"}', '{"method": "m"}'],
    )
    def test_wire_round_trip(self, request_json: str) -> None:
        req = JsonRpcRequest.model_validate_json(request_json)
        for response in (
            JsonRpcResponse.success(req, {"tools": []}),
            JsonRpcResponse.failure(req, -32602, "Invalid params", "bad"),
        ):
            encoded = json.dumps(response.to_wire())
            restored = JsonRpcResponse.model_validate_json(encoded)
            assert restored.to_wire() == response.to_wire()
            assert type(restored.id) is type(response.id)


class TestJsonRpcError:
    def test_basic(self) -> None:
        err = JsonRpcError(code=-32600, message="Invalid request")
        assert err.model_dump() == {"code": -32600, "message": "Invalid request"}


class TestMCPToolDef:
    def test_to_wire_uses_alias(self) -> None:
        tool = MCPToolDef(name="search", input_schema={"type": "object"})
        assert tool.to_wire() == {
            "name": "search",
            "description": "",
            "inputSchema": {"type": "object"},
        }

    def test_accepts_alias(self) -> None:
        tool = MCPToolDef.model_validate({"name": "x", "inputSchema": {"a": 1}})
        assert tool.input_schema == {"a": 1}


class TestToolCallParams:
    def test_arguments_optional(self) -> None:
        params = ToolCallParams.model_validate({"name": "fofa_search"})
        assert params.arguments is None


class TestCallToolResult:
    def test_success_omits_error_flag(self) -> None:
        assert CallToolResult.from_text("{}").to_wire() == {
            "content": [{"type": "text", "text": "{}"}]
        }

    def test_error_flag(self) -> None:
        wire = CallToolResult.from_text("Error: boom", is_error=True).to_wire()
        assert wire["isError"] is True
        assert wire["content"][0]["text"] == "Error: boom"
