"""ZoomEye provider — account info and asset search."""

from assetmcp.providers.zoomeye.client import ZoomEyeClient
from assetmcp.providers.zoomeye.tools import TOOL_DEFINITIONS, build_provider

__all__ = ["TOOL_DEFINITIONS", "ZoomEyeClient", "build_provider"]
