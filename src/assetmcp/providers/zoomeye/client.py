"""ZoomEyeClient — authenticated calls against the ZoomEye v2 REST API."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING, Any, TypeVar

from assetmcp.protocols.errors import ToolExecutionError
from assetmcp.providers.base import HTTPProviderClient
from assetmcp.providers.zoomeye.models import (
    SUCCESS_CODE,
    UserInfoResponse,
    ZoomEyeEnvelope,
    ZoomEyeSearchParams,
    ZoomEyeSearchResponse,
)

if TYPE_CHECKING:
    import httpx

    from assetmcp.config import ZoomEyeSettings

E = TypeVar("E", bound=ZoomEyeEnvelope)


class ZoomEyeClient(HTTPProviderClient):
    """ZoomEye API client; the key travels in the ``API-KEY`` header."""

    user_agent = "zoomeye-mcp/1.0"

    def __init__(
        self,
        settings: ZoomEyeSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(
            settings.base_url,
            timeout=settings.timeout,
            headers={"API-KEY": settings.api_key, "Content-Type": "application/json"},
            transport=transport,
        )

    def user_info(self) -> UserInfoResponse:
        body = self._request("POST", "/v2/userinfo")
        return _check(self._parse(UserInfoResponse, body))

    def search(self, params: ZoomEyeSearchParams) -> ZoomEyeSearchResponse:
        payload: dict[str, Any] = {
            "qbase64": base64.b64encode(params.query.encode("utf-8")).decode("ascii"),
            "page": params.page,
            "pagesize": params.pagesize,
            "fields": params.fields,
            "sub_type": params.sub_type,
        }
        if params.facets:
            payload["facets"] = params.facets
        if params.ignore_cache:
            payload["ignore_cache"] = True

        body = self._request("POST", "/v2/search", json_body=payload)
        return _check(self._parse(ZoomEyeSearchResponse, body))


def _check(result: E) -> E:
    if result.code != SUCCESS_CODE:
        raise ToolExecutionError(f"ZoomEye API error: {result.message} (code: {result.code})")
    return result
