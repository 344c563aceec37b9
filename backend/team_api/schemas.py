"""Pydantic schemas that describe the API responses."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

API_MESSAGE = "Team Project API"
NOT_FOUND_MESSAGE = "Not found"


def utc_timestamp(moment: datetime | None = None) -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    moment = moment or datetime.now(timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RootResponse(BaseModel):
    """Informational payload served from ``/``."""

    model_config = ConfigDict(extra="forbid")

    message: str = API_MESSAGE
    version: str


class HealthResponse(BaseModel):
    """Liveness payload for uptime checks."""

    model_config = ConfigDict(extra="forbid")

    status: str = "ok"
    timestamp: str = Field(default_factory=utc_timestamp)


class ErrorResponse(BaseModel):
    """Body returned for every unmatched route."""

    model_config = ConfigDict(extra="forbid")

    error: str = NOT_FOUND_MESSAGE
