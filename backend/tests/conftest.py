"""Shared pytest fixtures for backend tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
WORKSPACE_ROOT = ROOT.parent
for path in (ROOT, WORKSPACE_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from team_api.main import create_app  # noqa: E402
from team_api.server import ApiServer  # noqa: E402


@pytest.fixture()
def api_client() -> Iterator[TestClient]:
    """Provide a TestClient bound to a freshly built application."""
    with TestClient(create_app()) as client:
        yield client


@pytest.fixture()
def anyio_backend() -> str:
    """Force the anyio plugin to run against asyncio only."""
    return "asyncio"


@pytest.fixture()
def live_server() -> Iterator[ApiServer]:
    """Serve the app over a real socket on an ephemeral loopback port."""
    server = ApiServer(create_app(), host="127.0.0.1", port=0)
    server.start()
    try:
        yield server
    finally:
        server.stop()
