"""Resolve the API version reported by the root endpoint."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from . import __version__


@lru_cache(maxsize=1)
def get_application_version() -> str:
    """Return the semantic version string for the application.

    The repository ``VERSION`` file wins; installed copies without it fall
    back to the package ``__version__``.
    """
    repo_root = Path(__file__).resolve().parents[2]
    version_file = repo_root / "VERSION"
    try:
        version = version_file.read_text(encoding="utf8").strip()
    except FileNotFoundError:
        return __version__
    return version or __version__
