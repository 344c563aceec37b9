"""Assertion helpers shared by the API tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

NOT_FOUND_BODY = {"error": "Not found"}
ROOT_BODY = {"message": "Team Project API", "version": "1.0.0"}


def parse_timestamp(value: str) -> datetime:
    """Parse a ``Z``-suffixed ISO-8601 timestamp into an aware datetime."""
    assert value.endswith("Z"), value
    parsed = datetime.fromisoformat(value[:-1] + "+00:00")
    assert parsed.tzinfo is not None
    assert parsed.utcoffset() == timezone.utc.utcoffset(None)
    return parsed


def assert_json(response: Any, status_code: int) -> Any:
    """Check status and content type, then return the decoded body."""
    assert response.status_code == status_code, response.text
    assert response.headers["content-type"] == "application/json"
    return response.json()


def assert_not_found(response: Any) -> None:
    assert assert_json(response, 404) == NOT_FOUND_BODY
