"""HTTPProviderClient — shared request/parse plumbing for upstream search APIs.

Each call is a single synchronous request with the settings' timeout and no
retries. Every failure mode (transport, HTTP status, undecodable body) is
raised as :class:`~assetmcp.protocols.errors.ToolExecutionError` so the
server can hand it back to the caller as tool output.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError, model_validator

from assetmcp.protocols.errors import ToolExecutionError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class UpstreamModel(BaseModel):
    """Base for upstream response bodies: a JSON ``null`` field takes the field default."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class HTTPProviderClient:
    """Owns one reusable :class:`httpx.Client` for the lifetime of the process."""

    user_agent = "assetmcp/1.0"

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        merged = {"User-Agent": self.user_agent}
        merged.update(headers or {})
        self._http = httpx.Client(
            base_url=base_url,
            headers=merged,
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    def __enter__(self) -> HTTPProviderClient:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> bytes:
        """Perform one request and return the raw body of a 2xx response."""
        logger.debug("%s %s", method, path)
        try:
            response = self._http.request(method, path, params=params, json=json_body)
        except httpx.HTTPError as exc:
            raise ToolExecutionError(f"request failed: {exc}") from exc

        if not response.is_success:
            raise ToolExecutionError(
                f"API returned status {response.status_code}, body: {response.text}",
                status_code=response.status_code,
            )
        return response.content

    @staticmethod
    def _parse(model: type[M], body: bytes) -> M:
        try:
            return model.model_validate_json(body)
        except ValidationError as exc:
            raise ToolExecutionError(f"failed to parse response: {exc}") from exc

    @staticmethod
    def _parse_object(body: bytes) -> dict[str, Any]:
        """Decode a body that must be a JSON object but has no fixed schema."""
        try:
            data = json.loads(body)
        except ValueError as exc:
            raise ToolExecutionError(f"failed to parse response: {exc}") from exc
        if not isinstance(data, dict):
            raise ToolExecutionError(
                f"failed to parse response: expected a JSON object, got {type(data).__name__}"
            )
        return data
