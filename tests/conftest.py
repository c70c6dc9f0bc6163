"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from assetmcp.config import FofaSettings, ZoomEyeSettings


@pytest.fixture
def fofa_settings() -> FofaSettings:
    return FofaSettings(email="user@example.com", key="secret", base_url="https://fofa.test")


@pytest.fixture
def zoomeye_settings() -> ZoomEyeSettings:
    return ZoomEyeSettings(api_key="zk-123", base_url="https://zoomeye.test")


@pytest.fixture
def recorder() -> Callable[..., tuple[httpx.MockTransport, list[httpx.Request]]]:
    """Build a MockTransport that records requests and replies with a fixed response."""

    def _make(
        status_code: int = 200,
        json: object = None,
        content: bytes | None = None,
    ) -> tuple[httpx.MockTransport, list[httpx.Request]]:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        return httpx.MockTransport(handler), seen

    return _make
