"""FOFA provider — asset search, statistics and host lookup."""

from assetmcp.providers.fofa.client import FofaClient
from assetmcp.providers.fofa.tools import TOOL_DEFINITIONS, build_provider

__all__ = ["TOOL_DEFINITIONS", "FofaClient", "build_provider"]
