"""ToolArguments — lenient, typed access to loosely-typed tool-call arguments.

Arguments arrive as an arbitrary JSON object. Each extractor applies one
policy: a missing or wrongly-typed value falls back to the default, and only
:meth:`ToolArguments.require_str` may fail. Unknown keys are ignored.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from assetmcp.protocols.errors import ToolArgumentError


class ToolArguments:
    """Read-only view over the ``arguments`` object of a ``tools/call``."""

    def __init__(self, raw: Mapping[str, Any] | None = None) -> None:
        self._raw: dict[str, Any] = dict(raw or {})

    def __contains__(self, key: object) -> bool:
        return key in self._raw

    def __repr__(self) -> str:
        return f"ToolArguments({self._raw!r})"

    def require_str(self, key: str) -> str:
        """Return a non-empty string argument or raise :class:`ToolArgumentError`."""
        value = self._raw.get(key)
        if not isinstance(value, str) or value == "":
            raise ToolArgumentError(key)
        return value

    def get_str(self, key: str, default: str = "") -> str:
        """Return a string argument; absent, non-string, or empty values yield *default*."""
        value = self._raw.get(key)
        if isinstance(value, str) and value != "":
            return value
        return default

    def get_int(self, key: str, default: int) -> int:
        """Return a numeric argument truncated toward zero, or *default*.

        JSON booleans are not numbers here, and neither are NaN or infinities.
        """
        value = self._raw.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return default
        if isinstance(value, float) and not math.isfinite(value):
            return default
        return int(value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return a boolean argument, or *default* when absent or not a boolean."""
        value = self._raw.get(key)
        if isinstance(value, bool):
            return value
        return default


def clamp(value: int, lower: int, upper: int | None = None) -> int:
    """Coerce *value* into ``[lower, upper]``; ``upper=None`` leaves it unbounded."""
    if value < lower:
        return lower
    if upper is not None and value > upper:
        return upper
    return value
