"""Upstream providers and the registry the CLI selects them from."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from assetmcp.config import FofaSettings, ZoomEyeSettings
from assetmcp.protocols.mcp.models import MCPToolDef
from assetmcp.protocols.provider import ToolProvider
from assetmcp.providers import fofa, zoomeye


@dataclass(frozen=True)
class ProviderEntry:
    """How to build one provider: from environment to a ready :class:`ToolProvider`."""

    definitions: tuple[MCPToolDef, ...]
    factory: Callable[[Mapping[str, str] | None], ToolProvider]


def _fofa(environ: Mapping[str, str] | None = None) -> ToolProvider:
    return fofa.build_provider(fofa.FofaClient(FofaSettings.from_env(environ)))


def _zoomeye(environ: Mapping[str, str] | None = None) -> ToolProvider:
    return zoomeye.build_provider(zoomeye.ZoomEyeClient(ZoomEyeSettings.from_env(environ)))


PROVIDERS: dict[str, ProviderEntry] = {
    "fofa": ProviderEntry(fofa.TOOL_DEFINITIONS, _fofa),
    "zoomeye": ProviderEntry(zoomeye.TOOL_DEFINITIONS, _zoomeye),
}
