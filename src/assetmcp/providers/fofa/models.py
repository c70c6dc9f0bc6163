"""FOFA request parameters and response bodies."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from assetmcp.providers.base import UpstreamModel

DEFAULT_FIELDS = "host,ip,port,protocol"
DEFAULT_PAGE = 1
DEFAULT_SIZE = 100
MAX_SIZE = 10000
# FOFA caps result pages at 2000 rows when certificate or banner data is requested.
MAX_SIZE_CERT_OR_BANNER = 2000


class FofaSearchParams(BaseModel):
    """Validated ``fofa_search`` parameters, already clamped."""

    query: str
    page: int = DEFAULT_PAGE
    size: int = DEFAULT_SIZE
    fields: str = DEFAULT_FIELDS
    full: bool = False
    is_domain: bool = False


class FofaStatsParams(BaseModel):
    query: str
    fields: str = ""


class FofaHostParams(BaseModel):
    host: str


class FofaSearchResponse(UpstreamModel):
    """Body of ``/api/v1/search/all``.

    ``results`` holds one row per asset; rows are lists of field values, or
    bare values when a single field was requested.
    """

    error: bool = False
    errmsg: str = ""
    size: int = 0
    page: int = 0
    mode: str = ""
    query: str = ""
    results: list[Any] | None = None


class FofaStatsResponse(UpstreamModel):
    """Body of ``/api/v1/search/stats``. ``aggs`` is passed through untouched."""

    error: bool = False
    errmsg: str = ""
    distinct: dict[str, int] | None = None
    aggs: Any = None
