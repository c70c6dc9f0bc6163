"""assetmcp CLI entrypoint."""

from __future__ import annotations

import logging
import sys

import click

from assetmcp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="assetmcp")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Log level for diagnostics written to stderr.",
)
def main(log_level: str) -> None:
    """assetmcp — asset search tools for MCP clients."""
    # stdout carries the JSON-RPC stream; diagnostics go to stderr only.
    logging.basicConfig(
        stream=sys.stderr,
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
from assetmcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
