"""``assetmcp serve`` — run one provider as an MCP server on stdin/stdout."""

from __future__ import annotations

import logging
import sys

import click

from assetmcp.providers import PROVIDERS

logger = logging.getLogger(__name__)


@click.command()
@click.argument("provider", type=click.Choice(sorted(PROVIDERS)))
def serve(provider: str) -> None:
    """Serve PROVIDER's tools over newline-delimited JSON-RPC on stdio.

    Credentials come from the environment: FOFA_EMAIL and FOFA_KEY for
    fofa, ZOOMEYE_API_KEY for zoomeye.
    """
    from assetmcp.config import ConfigurationError
    from assetmcp.protocols.errors import TransportError
    from assetmcp.protocols.mcp.server import MCPServer
    from assetmcp.protocols.mcp.transport import StdioTransport

    try:
        tool_provider = PROVIDERS[provider].factory(None)
    except ConfigurationError as exc:
        logger.critical("%s", exc)
        sys.exit(1)

    transport = StdioTransport(sys.stdin.buffer, sys.stdout.buffer)
    server = MCPServer(tool_provider, transport)
    logger.info("Serving %s %s on stdio", tool_provider.name, tool_provider.version)

    try:
        server.serve()
    except TransportError as exc:
        logger.critical("%s", exc)
        sys.exit(1)
    logger.info("Input closed, shutting down")
