"""FofaClient — authenticated calls against the FOFA REST API."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING, Any
from urllib.parse import quote_plus

from assetmcp.protocols.errors import ToolExecutionError
from assetmcp.providers.base import HTTPProviderClient
from assetmcp.providers.fofa.models import (
    FofaSearchParams,
    FofaSearchResponse,
    FofaStatsResponse,
)

if TYPE_CHECKING:
    import httpx

    from assetmcp.config import FofaSettings

# Keys that signal an upstream failure rather than carry host data.
ERROR_KEYS = frozenset({"error", "errmsg"})


def encode_query(query: str) -> str:
    """Base64-encode a query expression for the ``qbase64`` parameter."""
    return base64.b64encode(query.encode("utf-8")).decode("ascii")


class FofaClient(HTTPProviderClient):
    """FOFA API client; credentials travel as ``email``/``key`` query parameters."""

    user_agent = "fofa-mcp/1.0"

    def __init__(
        self,
        settings: FofaSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(settings.base_url, timeout=settings.timeout, transport=transport)
        self._settings = settings

    def _auth(self) -> dict[str, str]:
        return {"email": self._settings.email, "key": self._settings.key}

    def search(self, params: FofaSearchParams) -> FofaSearchResponse:
        query = self._auth()
        query.update({
            "qbase64": encode_query(params.query),
            "page": str(params.page),
            "size": str(params.size),
            "fields": params.fields,
        })
        if params.full:
            query["full"] = "true"
        if params.is_domain:
            query["is_domain"] = "true"

        body = self._request("GET", "/api/v1/search/all", params=query)
        result = self._parse(FofaSearchResponse, body)
        if result.error:
            raise ToolExecutionError(f"FOFA API error: {result.errmsg}")
        return result

    def stats(self, query: str, fields: str = "") -> FofaStatsResponse:
        params = self._auth()
        params["qbase64"] = encode_query(query)
        if fields:
            params["fields"] = fields

        body = self._request("GET", "/api/v1/search/stats", params=params)
        result = self._parse(FofaStatsResponse, body)
        if result.error:
            raise ToolExecutionError(f"FOFA API error: {result.errmsg}")
        return result

    def host_info(self, host: str) -> dict[str, Any]:
        """Return the raw host document; its fields vary by account tier."""
        body = self._request("GET", f"/api/v1/host/{quote_plus(host)}", params=self._auth())
        result = self._parse_object(body)
        if result.get("error") is True:
            errmsg = result.get("errmsg")
            raise ToolExecutionError(f"FOFA API error: {errmsg if isinstance(errmsg, str) else ''}")
        return result
