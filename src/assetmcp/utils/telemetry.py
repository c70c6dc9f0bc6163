"""OpenTelemetry tracing helpers for assetmcp.

Provides a thin wrapper around the OpenTelemetry API so the rest of the
codebase can call ``get_tracer()`` without caring whether an SDK is
installed. Unless the embedding process configures a tracer provider, the
API returns no-op implementations with negligible overhead.

Usage::

    from assetmcp.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("assetmcp.tool.call") as span:
        span.set_attribute(ATTR_TOOL_NAME, "fofa_search")

Exporters must never write to stdout: it carries the JSON-RPC stream.
"""

from __future__ import annotations

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys used throughout assetmcp instrumentation
# ---------------------------------------------------------------------------

ATTR_PROVIDER = "assetmcp.provider"
ATTR_TOOL_NAME = "assetmcp.tool.name"
ATTR_TOOL_ERROR = "assetmcp.tool.error"

_INSTRUMENTATION_NAME = "assetmcp"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)
