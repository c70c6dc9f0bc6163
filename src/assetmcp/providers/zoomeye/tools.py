"""ZoomEye tool catalog, argument normalizers and response shaping."""

from __future__ import annotations

from typing import Any

from assetmcp.protocols.arguments import ToolArguments, clamp
from assetmcp.protocols.mcp.models import MCPToolDef
from assetmcp.protocols.provider import Tool, ToolProvider
from assetmcp.providers.zoomeye.client import ZoomEyeClient
from assetmcp.providers.zoomeye.models import (
    DEFAULT_FIELDS,
    DEFAULT_PAGE,
    DEFAULT_PAGESIZE,
    DEFAULT_SUB_TYPE,
    MAX_PAGESIZE,
    SUB_TYPES,
    NoParams,
    ZoomEyeSearchParams,
)

SERVER_NAME = "zoomeye-mcp"
SERVER_VERSION = "1.0.0"

_FIELD_GROUPS = """- Basic: ip, port, domain, url, hostname, os, service, title, version, device, rdns, product, banner, update_time
- Geolocation: continent.name, country.name, province.name, city.name, lon, lat, zipcode
- Network: asn, protocol, isp.name, organization.name
- SSL/TLS: ssl, ssl.jarm, ssl.ja3s
- HTTP: header, header_hash, body, body_hash, header.server.name, header.server.version
- Other: iconhash_md5, robots_md5, security_md5, idc, honeypot, primary_industry, sub_industry, rank"""

USERINFO_TOOL = MCPToolDef(
    name="zoomeye_userinfo",
    description=(
        "Fetch ZoomEye account information: username, email, subscription plan and points.\n\n"
        "Returns:\n"
        "- Account details (username, email, phone, creation time)\n"
        "- Subscription (plan, end date, points, ZoomEye points)\n\n"
        "Use it to check the current account status and remaining points."
    ),
    input_schema={"type": "object", "properties": {}},
)

SEARCH_TOOL = MCPToolDef(
    name="zoomeye_search",
    description=(
        "Search network assets in ZoomEye. Query expression, paging and returned fields "
        "can all be set by the model.\n\n"
        "Features:\n"
        "- Free-form query expressions (base64-encoded automatically)\n"
        "- Paging to any page\n"
        "- Any combination of ZoomEye API fields\n"
        "- Data type selection (v4, v6, web)\n"
        "- Facet statistics\n"
        "- Cache control (ignore_cache)\n\n"
        f"Supported fields:\n{_FIELD_GROUPS}\n\n"
        "Field access depends on the ZoomEye account tier (free, professional, business, ...)."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": (
                    'ZoomEye query expression, e.g. title="cisco vpn" or '
                    'app="nginx" && country="CN". Encoded to base64 automatically.'
                ),
            },
            "page": {
                "type": "integer",
                "description": "Page number, starting at 1. Defaults to 1.",
                "default": DEFAULT_PAGE,
            },
            "pagesize": {
                "type": "integer",
                "description": "Results per page, 1-10000, default 10.",
                "default": DEFAULT_PAGESIZE,
            },
            "fields": {
                "type": "string",
                "description": (
                    "Fields to return, comma separated, e.g. ip,port,domain,update_time.\n\n"
                    f"Common fields:\n{_FIELD_GROUPS}\n\n"
                    "Fields beyond your account tier come back empty."
                ),
                "default": DEFAULT_FIELDS,
            },
            "sub_type": {
                "type": "string",
                "description": "Data type: v4 (IPv4), v6 (IPv6) or web (web assets). Defaults to v4.",
                "enum": list(SUB_TYPES),
                "default": DEFAULT_SUB_TYPE,
            },
            "facets": {
                "type": "string",
                "description": (
                    "Facets to aggregate, comma separated. Supported: country, subdivisions, "
                    "city, product, service, device, os, port. E.g. country,product,port"
                ),
            },
            "ignore_cache": {
                "type": "boolean",
                "description": "Bypass the result cache. Business edition and above. Defaults to false.",
                "default": False,
            },
        },
        "required": ["query"],
    },
)

TOOL_DEFINITIONS: tuple[MCPToolDef, ...] = (USERINFO_TOOL, SEARCH_TOOL)


def normalize_userinfo(args: ToolArguments) -> NoParams:
    return NoParams()


def normalize_search(args: ToolArguments) -> ZoomEyeSearchParams:
    return ZoomEyeSearchParams(
        query=args.require_str("query"),
        page=clamp(args.get_int("page", DEFAULT_PAGE), 1),
        pagesize=clamp(args.get_int("pagesize", DEFAULT_PAGESIZE), 1, MAX_PAGESIZE),
        fields=args.get_str("fields", DEFAULT_FIELDS),
        sub_type=args.get_str("sub_type", DEFAULT_SUB_TYPE),
        facets=args.get_str("facets"),
        ignore_cache=args.get_bool("ignore_cache"),
    )


def build_provider(client: ZoomEyeClient) -> ToolProvider:
    """Bind the ZoomEye catalog to *client*."""

    def userinfo(_: NoParams) -> dict[str, Any]:
        result = client.user_info()
        return {
            "success": True,
            "code": result.code,
            "message": result.message,
            "data": result.data.model_dump(),
        }

    def search(params: ZoomEyeSearchParams) -> dict[str, Any]:
        result = client.search(params)
        return {
            "success": True,
            "code": result.code,
            "message": result.message,
            "total": result.total,
            "query": result.query,
            "count": len(result.data or []),
            "data": result.data,
        }

    return ToolProvider(
        SERVER_NAME,
        SERVER_VERSION,
        [
            Tool(USERINFO_TOOL, normalize_userinfo, userinfo),
            Tool(SEARCH_TOOL, normalize_search, search),
        ],
    )
