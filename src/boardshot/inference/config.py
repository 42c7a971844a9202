"""Server configuration loaded from the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


class ConfigError(Exception):
    """Raised when required server configuration is missing or invalid."""


@dataclass(slots=True, frozen=True)
class ServerSettings:
    """Settings for the inference server."""

    api_key: str
    model: str = DEFAULT_MODEL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    def __repr__(self) -> str:
        return (
            f"ServerSettings(api_key='***', model={self.model!r}, "
            f"host={self.host!r}, port={self.port})"
        )


def load_settings(environ: Mapping[str, str] | None = None) -> ServerSettings:
    """Build :class:`ServerSettings` from *environ* (``os.environ`` by default).

    A ``.env`` file in the working directory is merged into ``os.environ``
    first. A missing ``GEMINI_API_KEY`` is a startup error.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    api_key = environ.get("GEMINI_API_KEY", "").strip()
    if not api_key:
        raise ConfigError("GEMINI_API_KEY is not set")

    raw_port = environ.get("BOARDSHOT_PORT", str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError as exc:
        raise ConfigError(f"BOARDSHOT_PORT must be an integer, got {raw_port!r}") from exc

    return ServerSettings(
        api_key=api_key,
        model=environ.get("GEMINI_MODEL", "").strip() or DEFAULT_MODEL,
        host=environ.get("BOARDSHOT_HOST", "").strip() or DEFAULT_HOST,
        port=port,
    )
