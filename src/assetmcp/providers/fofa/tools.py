"""FOFA tool catalog, argument normalizers and response shaping."""

from __future__ import annotations

from typing import Any

from assetmcp.protocols.arguments import ToolArguments, clamp
from assetmcp.protocols.mcp.models import MCPToolDef
from assetmcp.protocols.provider import Tool, ToolProvider
from assetmcp.providers.fofa.client import ERROR_KEYS, FofaClient
from assetmcp.providers.fofa.models import (
    DEFAULT_FIELDS,
    DEFAULT_PAGE,
    DEFAULT_SIZE,
    MAX_SIZE,
    MAX_SIZE_CERT_OR_BANNER,
    FofaHostParams,
    FofaSearchParams,
    FofaStatsParams,
)

SERVER_NAME = "fofa-mcp"
SERVER_VERSION = "1.0.0"

_FIELDS_DOC = """Fields to return, comma separated, e.g. host,ip,port,protocol,title. Any combination of FOFA API fields is accepted.

Full field list (50 fields):
[No permission required (1-33)]: ip,port,protocol,country,country_name,region,city,longitude,latitude,asn,org,host,domain,os,server,icp,title,jarm,header,banner,cert,base_protocol,link,cert.issuer.org,cert.issuer.cn,cert.subject.org,cert.subject.cn,tls.ja3s,tls.version,cert.sn,cert.not_before,cert.not_after,cert.domain
[Personal edition and above (34-36)]: header_hash,banner_hash,banner_fid
[Professional edition and above (37-40)]: cname,lastupdatetime,product,product_category
[Business edition and above (41-47)]: product.version,icon_hash,cert.is_valid,cname_domain,body,cert.is_match,cert.is_equal
[Enterprise (48-50)]: icon,fid,structinfo

Notes:
- When the fields include cert or banner, size is capped at 2000
- Field access depends on your FOFA account tier; fields beyond it come back empty
- Combine any fields as needed"""

SEARCH_TOOL = MCPToolDef(
    name="fofa_search",
    description=(
        "Search assets in FOFA. Every parameter can be set by the model: query "
        "expression, page, page size and returned fields.\n\n"
        "50 return fields are supported, including basic fields (ip, port, host, ...), "
        "geolocation (country, region, city, ...), certificate fields (cert.*), protocol "
        "fields (banner, protocol, ...) and product fields (product, product.version, ...). "
        "Field access depends on the FOFA account tier.\n\n"
        "Important: when the fields argument includes cert or banner fields, size is "
        "automatically capped at 2000 instead of 10000."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": 'FOFA query expression, e.g. app="Apache" && country="CN".',
            },
            "page": {
                "type": "integer",
                "description": "Page number, starting at 1. Defaults to 1.",
                "default": DEFAULT_PAGE,
            },
            "size": {
                "type": "integer",
                "description": (
                    "Results per page, 1-10000, default 100. Capped at 2000 when "
                    "fields include cert or banner."
                ),
                "default": DEFAULT_SIZE,
            },
            "fields": {
                "type": "string",
                "description": _FIELDS_DOC,
                "default": DEFAULT_FIELDS,
            },
            "full": {
                "type": "boolean",
                "description": "Search all historical data instead of the last year. Defaults to false.",
                "default": False,
            },
            "is_domain": {
                "type": "boolean",
                "description": "Treat the query as a domain query. Defaults to false.",
                "default": False,
            },
        },
        "required": ["query"],
    },
)

STATS_TOOL = MCPToolDef(
    name="fofa_stats",
    description="Aggregate statistics for a FOFA query over the chosen fields.",
    input_schema={
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "FOFA query expression."},
            "fields": {
                "type": "string",
                "description": "Fields to aggregate, comma separated, e.g. country,server,protocol.",
            },
        },
        "required": ["query"],
    },
)

HOST_INFO_TOOL = MCPToolDef(
    name="fofa_host_info",
    description=(
        "Detailed information about one host, including IP, ASN, organization, "
        "country and protocols."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "host": {"type": "string", "description": "Host address, either an IP or a domain."},
        },
        "required": ["host"],
    },
)

TOOL_DEFINITIONS: tuple[MCPToolDef, ...] = (SEARCH_TOOL, STATS_TOOL, HOST_INFO_TOOL)


def max_search_size(fields: str) -> int:
    """Upper bound for ``size`` given the requested fields.

    Any field name containing ``cert`` or ``banner`` (case-insensitive,
    substring match) lowers the bound.
    """
    lowered = fields.lower()
    if "cert" in lowered or "banner" in lowered:
        return MAX_SIZE_CERT_OR_BANNER
    return MAX_SIZE


def normalize_search(args: ToolArguments) -> FofaSearchParams:
    query = args.require_str("query")
    fields = args.get_str("fields", DEFAULT_FIELDS)
    return FofaSearchParams(
        query=query,
        page=clamp(args.get_int("page", DEFAULT_PAGE), 1),
        size=clamp(args.get_int("size", DEFAULT_SIZE), 1, max_search_size(fields)),
        fields=fields,
        full=args.get_bool("full"),
        is_domain=args.get_bool("is_domain"),
    )


def normalize_stats(args: ToolArguments) -> FofaStatsParams:
    return FofaStatsParams(query=args.require_str("query"), fields=args.get_str("fields"))


def normalize_host(args: ToolArguments) -> FofaHostParams:
    return FofaHostParams(host=args.require_str("host"))


def build_provider(client: FofaClient) -> ToolProvider:
    """Bind the FOFA catalog to *client*."""

    def search(params: FofaSearchParams) -> dict[str, Any]:
        result = client.search(params)
        return {
            "success": True,
            "query": result.query,
            "page": result.page,
            "size": result.size,
            "mode": result.mode,
            "total": len(result.results or []),
            "results": result.results,
        }

    def stats(params: FofaStatsParams) -> dict[str, Any]:
        result = client.stats(params.query, params.fields)
        return {"success": True, "distinct": result.distinct, "aggs": result.aggs}

    def host_info(params: FofaHostParams) -> dict[str, Any]:
        document = client.host_info(params.host)
        response: dict[str, Any] = {"success": True}
        response.update({k: v for k, v in document.items() if k not in ERROR_KEYS})
        return response

    return ToolProvider(
        SERVER_NAME,
        SERVER_VERSION,
        [
            Tool(SEARCH_TOOL, normalize_search, search),
            Tool(STATS_TOOL, normalize_stats, stats),
            Tool(HOST_INFO_TOOL, normalize_host, host_info),
        ],
    )
