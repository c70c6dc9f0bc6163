"""StdioTransport — newline-delimited JSON over a pair of byte streams."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any, BinaryIO

from assetmcp.protocols.errors import TransportError

logger = logging.getLogger(__name__)


class StdioTransport:
    """Reads request lines from *reader* and writes response lines to *writer*.

    Both streams are binary; the CLI passes ``sys.stdin.buffer`` and
    ``sys.stdout.buffer``. Input is decoded as UTF-8 with invalid bytes
    replaced, so only a failing stream (not a bad line) stops the loop.
    """

    def __init__(self, reader: BinaryIO, writer: BinaryIO) -> None:
        self._reader = reader
        self._writer = writer

    def lines(self) -> Iterator[str]:
        """Yield each input line without its terminator until EOF."""
        while True:
            try:
                raw = self._reader.readline()
            except (OSError, ValueError) as exc:
                raise TransportError(f"failed to read input stream: {exc}") from exc
            if not raw:
                return
            yield raw.decode("utf-8", errors="replace").rstrip("\r\n")

    def send(self, data: dict[str, Any]) -> bool:
        """Write one JSON line; failures are logged and reported as ``False``."""
        try:
            line = json.dumps(data, ensure_ascii=False) + "\n"
        except (TypeError, ValueError) as exc:
            logger.error("Failed to encode response: %s", exc)
            return False
        try:
            self._writer.write(line.encode("utf-8"))
            self._writer.flush()
        except (OSError, ValueError) as exc:
            logger.error("Failed to write response: %s", exc)
            return False
        return True
