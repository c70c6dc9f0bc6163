"""Shared error types for the protocol layer."""

from __future__ import annotations


class ProtocolError(Exception):
    """Base error for all protocol-layer failures."""


class TransportError(ProtocolError):
    """The input stream itself could not be read."""


class ToolNotFoundError(ProtocolError):
    """Requested tool does not exist in the provider's catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolError(ProtocolError):
    """Base for failures reported to the caller as tool output, not as protocol errors."""


class ToolArgumentError(ToolError):
    """A required tool argument is missing or empty."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"the '{argument}' argument is required")


class ToolExecutionError(ToolError):
    """The upstream provider call failed."""

    def __init__(self, detail: str, *, status_code: int | None = None) -> None:
        self.detail = detail
        self.status_code = status_code
        super().__init__(detail)
