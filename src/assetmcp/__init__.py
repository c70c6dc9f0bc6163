"""assetmcp — internet asset search APIs exposed as MCP tools over stdio."""

from __future__ import annotations

__version__ = "0.1.0"
