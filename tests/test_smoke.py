"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import assetmcp

    assert assetmcp.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from assetmcp.cli import main

    assert callable(main)


def test_provider_registry() -> None:
    from assetmcp.providers import PROVIDERS

    assert sorted(PROVIDERS) == ["fofa", "zoomeye"]
