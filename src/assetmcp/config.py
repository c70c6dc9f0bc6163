"""Provider settings — credentials and transport options read once at startup.

Settings are immutable and handed to the provider clients explicitly;
nothing in request handling reads the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel

DEFAULT_TIMEOUT = 30.0


class ConfigurationError(Exception):
    """Required credentials are missing from the environment."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing required environment variable(s): {', '.join(missing)}")


def _require(environ: Mapping[str, str], *names: str) -> dict[str, str]:
    values = {name: environ.get(name, "") for name in names}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ConfigurationError(missing)
    return values


class FofaSettings(BaseModel):
    """Credentials for the FOFA API (``FOFA_EMAIL`` / ``FOFA_KEY``)."""

    model_config = {"frozen": True}

    email: str
    key: str
    base_url: str = "https://fofa.info"
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FofaSettings:
        values = _require(os.environ if environ is None else environ, "FOFA_EMAIL", "FOFA_KEY")
        return cls(email=values["FOFA_EMAIL"], key=values["FOFA_KEY"])


class ZoomEyeSettings(BaseModel):
    """Credentials for the ZoomEye API (``ZOOMEYE_API_KEY``)."""

    model_config = {"frozen": True}

    api_key: str
    base_url: str = "https://api.zoomeye.org"
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ZoomEyeSettings:
        values = _require(os.environ if environ is None else environ, "ZOOMEYE_API_KEY")
        return cls(api_key=values["ZOOMEYE_API_KEY"])
