"""Runtime configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Final

DEFAULT_PORT: Final[int] = 3000
DEFAULT_HOST: Final[str] = "0.0.0.0"
MAX_PORT: Final[int] = 65535


class SettingsError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    """Application settings sourced from environment variables."""

    port: int
    host: str

    @classmethod
    def from_env(cls) -> "Settings":
        """Construct settings using environment variables with sane defaults."""
        return cls(
            port=_load_port(),
            host=os.getenv("HOST") or DEFAULT_HOST,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings.from_env()


def _load_port() -> int:
    """Return the listening port, falling back to the default when unset."""
    raw = os.getenv("PORT")
    if not raw or not raw.strip():
        return DEFAULT_PORT
    try:
        port = int(raw.strip())
    except ValueError as exc:
        raise SettingsError(f"PORT must be an integer, got {raw!r}.") from exc
    # 0 lets the OS pick an ephemeral port.
    if not 0 <= port <= MAX_PORT:
        raise SettingsError(f"PORT must be between 0 and {MAX_PORT}, got {port}.")
    return port
