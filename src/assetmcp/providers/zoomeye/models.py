"""ZoomEye request parameters and response bodies."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from assetmcp.providers.base import UpstreamModel

# ZoomEye reports success in the body, not the status line.
SUCCESS_CODE = 60000

DEFAULT_FIELDS = "ip,port,domain,update_time"
DEFAULT_PAGE = 1
DEFAULT_PAGESIZE = 10
MAX_PAGESIZE = 10000
DEFAULT_SUB_TYPE = "v4"
SUB_TYPES = ("v4", "v6", "web")


class ZoomEyeSearchParams(BaseModel):
    """Validated ``zoomeye_search`` parameters, already clamped."""

    query: str
    page: int = DEFAULT_PAGE
    pagesize: int = DEFAULT_PAGESIZE
    fields: str = DEFAULT_FIELDS
    sub_type: str = DEFAULT_SUB_TYPE
    facets: str = ""
    ignore_cache: bool = False


class NoParams(BaseModel):
    """Parameter set of tools that take no arguments."""


Scalar = str | int | float


class Subscription(UpstreamModel):
    plan: Scalar = ""
    end_date: Scalar = ""
    points: Scalar = ""
    zoomeye_points: Scalar = ""


class UserInfo(UpstreamModel):
    username: str = ""
    email: str = ""
    phone: str = ""
    created_at: str = ""
    subscription: Subscription = Field(default_factory=Subscription)


class ZoomEyeEnvelope(UpstreamModel):
    code: int = 0
    message: str = ""


class UserInfoResponse(ZoomEyeEnvelope):
    """Body of ``/v2/userinfo``."""

    data: UserInfo = Field(default_factory=UserInfo)


class ZoomEyeSearchResponse(ZoomEyeEnvelope):
    """Body of ``/v2/search``; ``data`` records carry whichever fields were requested."""

    total: int = 0
    query: str = ""
    data: list[dict[str, Any]] | None = None
