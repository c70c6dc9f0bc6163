"""Tests for ZoomEyeClient against a mocked HTTP transport."""

import base64
import json

import pytest

from assetmcp.protocols.errors import ToolExecutionError
from assetmcp.providers.zoomeye.client import ZoomEyeClient
from assetmcp.providers.zoomeye.models import ZoomEyeSearchParams


class TestUserInfo:
    def test_request_and_parse(self, zoomeye_settings, recorder) -> None:
        transport, seen = recorder(json={
            "code": 60000,
            "message": "success",
            "data": {"username": "alice", "subscription": {"plan": "free", "points": "10"}},
        })
        result = ZoomEyeClient(zoomeye_settings, transport=transport).user_info()
        assert result.data.username == "alice"
        assert result.data.subscription.points == "10"
        [request] = seen
        assert request.method == "POST"
        assert request.url.path == "/v2/userinfo"
        assert request.headers["API-KEY"] == "zk-123"
        assert request.headers["User-Agent"] == "zoomeye-mcp/1.0"

    def test_null_fields_take_defaults(self, zoomeye_settings, recorder) -> None:
        transport, _ = recorder(json={
            "code": 60000,
            "message": None,
            "data": {
                "username": "bob",
                "email": None,
                "phone": None,
                "created_at": None,
                "subscription": {"plan": None, "end_date": None, "points": None, "zoomeye_points": "0"},
            },
        })
        result = ZoomEyeClient(zoomeye_settings, transport=transport).user_info()
        assert result.message == ""
        assert (result.data.email, result.data.phone, result.data.created_at) == ("", "", "")
        assert result.data.subscription.end_date == ""
        assert result.data.subscription.plan == ""
        assert result.data.subscription.points == ""

    def test_null_subscription(self, zoomeye_settings, recorder) -> None:
        transport, _ = recorder(json={"code": 60000, "message": "ok", "data": {"subscription": None}})
        result = ZoomEyeClient(zoomeye_settings, transport=transport).user_info()
        assert result.data.subscription.plan == ""

    def test_error_code(self, zoomeye_settings, recorder) -> None:
        transport, _ = recorder(json={"code": 30001, "message": "invalid key"})
        with pytest.raises(ToolExecutionError, match=r"ZoomEye API error: invalid key \(code: 30001\)"):
            ZoomEyeClient(zoomeye_settings, transport=transport).user_info()


class TestSearch:
    def test_body(self, zoomeye_settings, recorder) -> None:
        transport, seen = recorder(json={"code": 60000, "message": "ok", "total": 1, "query": "q", "data": [{"ip": "x"}]})
        client = ZoomEyeClient(zoomeye_settings, transport=transport)
        result = client.search(ZoomEyeSearchParams(query='app="nginx"', page=3, pagesize=25))

        assert result.total == 1
        body = json.loads(seen[0].content)
        assert body == {
            "qbase64": base64.b64encode(b'app="nginx"').decode(),
            "page": 3,
            "pagesize": 25,
            "fields": "ip,port,domain,update_time",
            "sub_type": "v4",
        }
        assert seen[0].url.path == "/v2/search"

    def test_optional_body_fields(self, zoomeye_settings, recorder) -> None:
        transport, seen = recorder(json={"code": 60000})
        ZoomEyeClient(zoomeye_settings, transport=transport).search(
            ZoomEyeSearchParams(query="q", facets="country,port", ignore_cache=True)
        )
        body = json.loads(seen[0].content)
        assert body["facets"] == "country,port"
        assert body["ignore_cache"] is True

    def test_non_success_status(self, zoomeye_settings, recorder) -> None:
        transport, _ = recorder(status_code=403, content=b'{"code":30003}')
        with pytest.raises(ToolExecutionError, match="status 403") as info:
            ZoomEyeClient(zoomeye_settings, transport=transport).search(ZoomEyeSearchParams(query="q"))
        assert info.value.status_code == 403

    def test_schema_mismatch(self, zoomeye_settings, recorder) -> None:
        transport, _ = recorder(json={"code": 60000, "data": "not-a-list"})
        with pytest.raises(ToolExecutionError, match="failed to parse response"):
            ZoomEyeClient(zoomeye_settings, transport=transport).search(ZoomEyeSearchParams(query="q"))
