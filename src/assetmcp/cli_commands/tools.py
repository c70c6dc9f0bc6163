"""``assetmcp tools`` — show a provider's static tool catalog."""

from __future__ import annotations

import json

import click

from assetmcp.cli_commands._output import console, print_tools_table
from assetmcp.providers import PROVIDERS


@click.command()
@click.argument("provider", type=click.Choice(sorted(PROVIDERS)))
@click.option("--json", "as_json", is_flag=True, help="Print the exact tools/list payload.")
def tools(provider: str, as_json: bool) -> None:
    """List the tools PROVIDER exposes. No credentials are needed."""
    definitions = PROVIDERS[provider].definitions
    if as_json:
        payload = {"tools": [d.to_wire() for d in definitions]}
        console.print_json(json.dumps(payload, ensure_ascii=False))
        return
    print_tools_table(definitions)
